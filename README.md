# usdlite

Pure-Python building blocks for working with scene description material data.
It has no third-party dependencies.

- `usdlite.path`: scene description paths (`Path`, `path`). You can append
  properties, child paths and variant selections, find the owning prim path,
  and validate identifiers.
- `usdlite.value`: the tagged `Value` type that holds field data. It is checked
  with `is_a` and `try_as` against a `ValueType`.
- `usdlite.schema`: the registered field names (`FieldKey`) and children keys
  (`ChildrenKey`).
- `usdlite.sdf`: `SpecType`, `Specifier`, `Permission`, `Variability`,
  `LayerOffset`, `Payload`, `Reference`, `ListOp` and `Spec`.
- `usdlite.mtlx_parser` and `usdlite.mtlx_types`: a MaterialX (`.mtlx`) reader.
  It covers node graphs, image and normal-map nodes, `standard_surface` shaders
  and `surfacematerial` definitions.
- `usdlite.shade_parser` and `usdlite.shade_types`: they turn `Material` prims
  with `UsdPreviewSurface`, `UsdUVTexture` and `UsdPrimvarReader` shaders into
  structured objects.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Paths

```python
from usdlite.path import Path, path

prim = path("/World/Chair")
attr = prim.append_property("roughness")
print(attr.as_str())              # /World/Chair.roughness
print(attr.is_property_path())    # True
print(attr.prim_path().as_str())  # /World/Chair

print(prim.append_variant_selection("look", "red").as_str())  # /World/Chair{look=red}
print(Path.is_valid_identifier("_test1"))                      # True
```

`Path` values are compared, ordered and hashed by their text.

Some edits are invalid and raise `ValueError`:

- appending an absolute path to an absolute path;
- appending a path or a property to a property path;
- appending an empty property name.

## Values and specs

A `Value` pairs a `ValueType` with the data it carries:

```python
from usdlite.value import Value, ValueType

roughness = Value(ValueType.FLOAT, 0.25)
roughness.is_a(ValueType.FLOAT)    # True
roughness.try_as(ValueType.TOKEN)  # None
Value.from_str("text")             # Value(kind=ValueType.STRING, data='text')
```

A `Spec` holds a `SpecType` and a dictionary of fields.

- `Spec.add(key, value)` takes a field name or a `FieldKey`.
- The value may be a `Value` or plain text. Plain text is stored as a string
  value, and anything else raises `TypeError`.
- `LayerOffset` maps times with `apply` (`offset + time * scale`) and reverses
  them with `apply_inverse`.

## MaterialX

```python
from usdlite.mtlx_parser import parse_mtlx_file

doc = parse_mtlx_file("material.mtlx")
for name, material in doc.materials.items():
    shader = doc.get_shader(material.shader_name)
    if shader is not None and shader.base_color is not None:
        print(name, doc.resolve_texture_path(shader.base_color))
```

`parse_mtlx` takes the XML text directly.

`resolve_texture_path` follows a node graph connection to its image node, going
through a normal-map node if there is one. It returns the image file.

Any of these raises `MtlxError`, a subclass of `ValueError`:

- a file that cannot be read;
- text that is not well-formed XML;
- a root element that is not `materialx`.

## UsdShade materials

`parse_materials` takes a mapping from `Path` to `Spec` and returns one
`Material` for each prim spec whose `typeName` token is `Material`.

- Shader children are found through the material's `primChildren` tokens.
- Each shader kind is chosen by its `info:id`.
- Inputs are read from `inputs:<name>` attribute specs.
- Connections are read from the `connectionPaths` path list op of
  `inputs:<name>.connect` specs.

```python
from usdlite.path import Path
from usdlite.sdf import Spec, SpecType
from usdlite.shade_parser import parse_materials
from usdlite.value import Value, ValueType

specs = {
    Path("/Mat"): Spec(SpecType.PRIM, {
        "typeName": Value(ValueType.TOKEN, "Material"),
        "primChildren": Value(ValueType.TOKEN_VEC, ["Surface"]),
    }),
    Path("/Mat/Surface"): Spec(SpecType.PRIM, {
        "typeName": Value(ValueType.TOKEN, "Shader"),
    }),
    Path("/Mat/Surface.info:id"): Spec(SpecType.ATTRIBUTE, {
        "default": Value(ValueType.TOKEN, "UsdPreviewSurface"),
    }),
    Path("/Mat/Surface.inputs:roughness"): Spec(SpecType.ATTRIBUTE, {
        "default": Value(ValueType.FLOAT, 0.25),
    }),
}

for material in parse_materials(specs):
    print(material.name, material.get_texture_paths())  # Mat []
    print(material.surface.roughness)                    # ScalarSlot(value=0.25)
    for texture in material.textures:
        print(texture.get_uv_set(material.primvar_readers))
```

Preview-surface inputs that are not set take the schema defaults: diffuse
colour 0.18 grey, metallic 0, roughness 0.5, opacity 1, ior 1.5, specular 0.5,
clearcoat roughness 0.01.

`parse_connection_path` splits a connection target into its shader path and
output channel. For example, `</Mat/Tex.outputs:r>` gives
`("/Mat/Tex", TextureOutput.R)`.

## What it does not do

usdlite does not read `.usda`, `.usdc` or `.usdz` files, and it does not
compose layers. The specs passed to `parse_materials` must be built or
obtained by the caller. There is no command-line tool.