import re

# segments that keep their all-caps spelling
_ABBREVIATIONS = {
    "id": "ID",
    "url": "URL",
    "api": "API",
}

_STRIP_CHARS = re.compile(r'[{}\-_]')


def last_segment(pointer: str) -> str:
    return pointer.split("/")[-1]


def type_name_from_parts(*parts: str) -> str:
    name = ""
    for part in parts:
        cleaned = _STRIP_CHARS.sub("", part)
        abbreviation = _ABBREVIATIONS.get(cleaned.lower())
        if abbreviation is not None:
            name += abbreviation
        else:
            name += cleaned.capitalize()
    return name


def type_name_from_pointer(pointer: str) -> str:
    """Identifier-safe name of the node a pointer addresses.

    Only the final path segment is used, so ``#/definitions/movie`` and
    ``#/definitions/cinema/properties/movie`` both become ``Movie``.
    """
    return type_name_from_parts(last_segment(pointer))


def external_name_from_pointer(pointer: str) -> str:
    return last_segment(pointer)


def snake_case(name: str) -> str:
    name = re.sub(r'([a-z])([A-Z])', r'\1_\2', name)
    name = re.sub(r'[^A-Za-z0-9]+', '_', name)

    return name.strip('_').lower()


def sample_file_name(pointer: str) -> str:
    return f"{snake_case(pointer.lstrip('#'))}.json"
