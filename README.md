# scaletype

`scaletype` describes the shape of SCALE-encodable types as immutable Python
objects, with a JSON form that can be written out and read back again.

It models:

- `Path` (`scaletype.path`): the namespaced name of a type, such as
  `hello::world::Planet`;
- `Field` (`scaletype.fields`): a named or unnamed field with its type
  reference, the type name as written in source code, and documentation;
- `TypeDefComposite` (`scaletype.composite`): a struct, tuple struct or unit
  struct;
- `Variant` and `TypeDefVariant` (`scaletype.variant`): enums and their
  variants, each with an index from 0 to 255;
- `TypeDefPrimitive`, `TypeDefArray`, `TypeDefTuple`, `TypeDefSequence`,
  `TypeDefCompact`, `TypeDefBitSequence`, `TypeParameter` and `Type`
  (`scaletype.typedef`): the remaining definitions and a complete type
  description.

## Installation

```
pip install scaletype
```

## Paths

```python
from scaletype.path import Path, InvalidIdentifierError, MissingSegmentsError

path = Path.new("Planet", "hello::world")
str(path)          # "hello::world::Planet"
path.ident()       # "Planet"
path.namespace()   # ("hello", "world")
path.is_empty()    # False

Path.from_segments(["Hello", ", World!"])   # raises InvalidIdentifierError, .segment == 1
Path.from_segments([])                      # raises MissingSegmentsError
Path.voldemort()                            # the empty path, Path(())
```

Every segment must be an ASCII identifier: a letter or underscore followed
by letters, digits or underscores (see `scaletype.utils.is_rust_identifier`).
Both error classes derive from `PathError`, which is a `ValueError`.

## Types and JSON

Type references are whatever values you put in them; usually integer ids
into a table of types you keep yourself. Every class has `to_json()`
returning plain dicts, lists and strings, and a `from_json()` class method
that reads that form back, raising `ValueError` on malformed input.

```python
from scaletype.path import Path
from scaletype.fields import Field
from scaletype.composite import TypeDefComposite
from scaletype.typedef import Type

ty = Type(
    path=Path.new("Struct", "json"),
    type_def=TypeDefComposite([
        Field(name="a", ty=0, type_name="i32"),
        Field(name="c", ty=3, type_name="bool"),
    ]),
)
ty.to_json()
# {"path": ["json", "Struct"],
#  "def": {"composite": {"fields": [
#      {"name": "a", "type": 0, "typeName": "i32"},
#      {"name": "c", "type": 3, "typeName": "bool"}]}}}

assert Type.from_json(ty.to_json()) == ty
```

Empty paths, parameter lists, field and variant lists and documentation are
left out of the JSON, and absent field names and type names are omitted.
The `"def"` object has exactly one key naming the kind: `composite`,
`variant`, `sequence`, `array`, `tuple`, `primitive`, `compact` or
`bitsequence`. `typedef_to_json` and `typedef_from_json` in
`scaletype.typedef` handle that object by itself. Primitives are written by
their lower-case name (`"bool"`, `"u8"`, `"i256"`, ...); `TypeDefArray`
lengths must fit in 32 bits.

## What it does not do

The package only holds and (de)serializes type descriptions. It does not
keep a registry that assigns type ids, does not derive descriptions from
Python classes, and does not encode or decode values in the SCALE binary
format.

## Running the tests

```
pip install -e ".[test]"
pytest
```