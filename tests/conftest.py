import pytest

from jsonschemac.context import GeneratorContext
from jsonschemac.schema import parse

# Simple schema with definitions and refs
SCHEMA_WITH_DEFINITIONS = """
{
  "definitions": {
    "movie": {
      "type": "object",
      "required": ["id", "name"],
      "properties": {
        "id": {"type": "string"},
        "name": {"type": "string"},
        "year": {"type": "integer"},
        "actor": {
          "type": "object",
          "properties": {
            "id": {"type": "string"},
            "name": {"type": "string"}
          }
        },
        "categories": {"$ref": "#/definitions/categories"}
      }
    },
    "categories": {
      "type": "array",
      "items": {"type": "string"}
    }
  }
}
"""

# Schema without definitions, its only ref points nowhere
SCHEMA_DIRECT = """
{
  "type": "object",
  "required": ["id", "name"],
  "properties": {
    "id": {"type": "string"},
    "name": {"type": "string"},
    "year": {"type": "integer"},
    "actor": {
      "type": "object",
      "properties": {
        "id": {"type": "string"},
        "name": {"type": "string"}
      }
    },
    "categories": {"$ref": "#/definitions/categories"}
  }
}
"""

SCHEMA_WITH_NESTED_DEFINITIONS = """
{
  "definitions": {
    "movie": {
      "type": "object",
      "properties": {
        "id": {"type": "string"},
        "name": {"type": "string"}
      },
      "definitions": {
        "actor": {
          "type": "object",
          "properties": {
            "id": {"type": "string"},
            "name": {"type": "string"}
          }
        }
      }
    }
  }
}
"""

SCHEMA_PRIMITIVE_TYPES = """
{
  "definitions": {
    "null": {"type": "null"},
    "boolean": {"type": "boolean"},
    "object": {"type": "object"},
    "array": {"type": "array"},
    "number": {"type": "number"},
    "integer": {"type": "integer"},
    "string": {"type": "string"}
  }
}
"""

SCHEMA_REQUIRED_VALIDATION = """
{
  "definitions": {
    "movie": {
      "type": "object",
      "required": ["id", "actors"],
      "properties": {
        "id": {"type": "string"},
        "actors": {
          "type": "array",
          "items": {"$ref": "#/definitions/actor"}
        }
      }
    },
    "actor": {
      "type": "object",
      "required": ["name", "location"],
      "properties": {
        "name": {"type": "string"},
        "location": {"$ref": "#/definitions/location"}
      }
    },
    "location": {
      "type": "object",
      "required": ["name"],
      "properties": {
        "name": {"type": "string"}
      }
    }
  }
}
"""

SCHEMA_WITH_ARRAY_OF_OBJECTS = """
{
  "definitions": {
    "movies": {
      "type": "array",
      "items": {
        "type": "object",
        "properties": {
          "id": {"type": "string"},
          "name": {"type": "string"},
          "year": {"type": "integer"}
        }
      }
    }
  }
}
"""

SCHEMA_USER = """
{
  "definitions": {
    "user": {
      "type": "object",
      "required": ["id"],
      "properties": {
        "id": {"type": "string"},
        "name": {"type": "string"}
      }
    }
  }
}
"""

SCHEMA_INCONSISTENT_REQUIRED = """
{
  "definitions": {
    "account": {
      "type": "object",
      "properties": {"id": {"type": "string"}}
    },
    "user": {
      "type": "object",
      "required": ["id", "email"],
      "properties": {"id": {"type": "string"}}
    }
  }
}
"""

SCHEMA_SELF_REFERENCE = """
{
  "definitions": {
    "node": {
      "type": "object",
      "properties": {
        "value": {"type": "integer"},
        "next": {"$ref": "#/definitions/node"}
      }
    }
  }
}
"""


@pytest.fixture
def movie_index():
    return parse(SCHEMA_WITH_DEFINITIONS)


@pytest.fixture
def movie_ctx():
    return GeneratorContext.from_source(SCHEMA_WITH_DEFINITIONS)


@pytest.fixture
def required_index():
    return parse(SCHEMA_REQUIRED_VALIDATION)


@pytest.fixture
def primitive_index():
    return parse(SCHEMA_PRIMITIVE_TYPES)


@pytest.fixture
def schema_file(tmp_path):
    def write(text: str, name: str = "schema.json"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return write
