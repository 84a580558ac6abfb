import json

from jsonschemac import GeneratorContext, GoGenerator, MockGenerator, SchemaError

SCHEMA = """
{
  "definitions": {
    "movie": {
      "type": "object",
      "required": ["id", "name"],
      "properties": {
        "id": {"type": "string"},
        "name": {"type": "string"},
        "year": {"type": "integer"},
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


def main():
    try:
        ctx = GeneratorContext.from_source(SCHEMA, package="films")

        print(GoGenerator.package_src(ctx))

        movie = ctx.index["#/definitions/movie"]
        print("Sample movie:", json.dumps(MockGenerator.synthesize(movie, ctx.index), indent=2))
    except SchemaError as e:
        print(f"{e} (at {e.pointer})")


if __name__ == "__main__":
    main()
