from functools import cached_property
from typing import Union

from jsonschemac.model_generator import GeneratedModel, generate_models
from jsonschemac.schema import Index, parse


class GeneratorContext:
    def __init__(self, idx: Index, package: str = "main"):
        self.index = idx
        self.package = package

    @classmethod
    def from_source(cls, data: Union[bytes, str], package: str = "main") -> "GeneratorContext":
        return cls(parse(data), package=package)

    @cached_property
    def model(self) -> GeneratedModel:
        return generate_models(self.index)
