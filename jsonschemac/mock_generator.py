import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from jsonschemac.context import GeneratorContext
from jsonschemac.errors import CycleDetectedError
from jsonschemac.helpers.name_resolvers import sample_file_name
from jsonschemac.helpers.ref import resolve_ref
from jsonschemac.model_generator import sorted_pointers_by_name
from jsonschemac.schema import Index, Kind, SchemaNode

logger = logging.getLogger(__name__)

SAMPLE_STRING = "string"
SAMPLE_INTEGER = 42
SAMPLE_NUMBER = 3.14
SAMPLE_BOOLEAN = True


class MockGenerator:
    @staticmethod
    def generate(ctx: GeneratorContext, target_dirs: List[Union[str, Path]]) -> List[Path]:
        """Write one JSON sample per object/array schema into every target dir."""
        target_paths = [Path(d) for d in target_dirs]

        # build every sample first so a failing schema leaves the dirs untouched
        samples: Dict[str, Any] = {}
        for pointer in sorted_pointers_by_name(ctx.index):
            node = ctx.index[pointer]
            if node.is_complex:
                samples[sample_file_name(pointer)] = MockGenerator.synthesize(node, ctx.index)

        for p in target_paths:
            clean_sample_json_files(p)
            p.mkdir(parents=True, exist_ok=True)

        written: List[Path] = []
        for file_name, sample in samples.items():
            text = json.dumps(sample, indent=2, ensure_ascii=False)
            for dirp in target_paths:
                path = dirp / file_name
                path.write_text(text + "\n", encoding="utf-8")
                logger.info("wrote sample %s", path)
                written.append(path)

        return written

    @staticmethod
    def synthesize(node: SchemaNode, idx: Index) -> Any:
        return MockGenerator.generate_sample(node, idx, ())

    @staticmethod
    def generate_sample(node: SchemaNode, idx: Index, chain: Tuple[str, ...]) -> Any:
        if node.kind is Kind.REFERENCE:
            # chain holds the references being expanded on the current path
            if node.pointer in chain:
                raise CycleDetectedError(node.pointer, chain)
            target = resolve_ref(node, idx)
            return MockGenerator.generate_sample(target, idx, chain + (node.pointer,))

        if node.kind is Kind.OBJECT:
            return {
                name: MockGenerator.generate_sample(prop, idx, chain)
                for name, prop in sorted(node.properties.items())
            }

        if node.kind is Kind.ARRAY:
            if node.items is None:
                return []
            return [MockGenerator.generate_sample(node.items, idx, chain)]

        if node.kind is Kind.STRING:
            return SAMPLE_STRING
        if node.kind is Kind.INTEGER:
            return SAMPLE_INTEGER
        if node.kind is Kind.NUMBER:
            return SAMPLE_NUMBER
        if node.kind is Kind.BOOLEAN:
            return SAMPLE_BOOLEAN

        # null and untyped
        return None


def clean_sample_json_files(samples_dir: Path) -> None:
    if not samples_dir.exists() or not samples_dir.is_dir():
        return
    deleted = 0
    for file in samples_dir.iterdir():
        if file.is_file() and file.suffix == ".json":
            file.unlink()
            deleted += 1
    logger.info("cleaned %d json files from %s", deleted, samples_dir.resolve())
