"""Reading material and shader prims from composed specs into shading types."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from .path import Path
from .schema import ChildrenKey, FieldKey
from .sdf import Spec, SpecType
from .shade_types import (
    ColorSlot,
    Float2,
    Float4,
    Material,
    ScalarSlot,
    SourceColorSpace,
    TextureOutput,
    TextureRef,
    TextureSlot,
    UsdPreviewSurface,
    UsdPrimvarReader,
    UsdUVTexture,
    WrapMode,
)
from .value import Value, ValueType

Specs = Mapping[Path, Spec]

_PRIMVAR_READER_IDS = frozenset(
    {
        "UsdPrimvarReader_float2",
        "UsdPrimvarReader_float3",
        "UsdPrimvarReader_float",
        "UsdPrimvarReader_int",
        "UsdPrimvarReader_string",
        "UsdPrimvarReader_normal",
        "UsdPrimvarReader_point",
        "UsdPrimvarReader_vector",
    }
)


def parse_materials(specs: Specs) -> list[Material]:
    """Find every Material prim in ``specs`` and parse its shader children."""
    materials = []
    for prim_path, spec in specs.items():
        if spec.ty != SpecType.PRIM:
            continue
        if _type_name(spec) == "Material":
            materials.append(_parse_material(specs, prim_path))
    return materials


def parse_connection_path(connection: str) -> Tuple[str, TextureOutput]:
    """Split a connection target into its shader path and output channel.

    ``</Material/Texture.outputs:rgb>`` gives ``("/Material/Texture", RGB)``.
    """
    cleaned = connection.lstrip("<").rstrip(">")
    shader_path, sep, output_part = cleaned.partition(".")
    if not sep:
        return cleaned, TextureOutput.RGB

    prefix = "outputs:"
    while output_part.startswith(prefix):
        output_part = output_part[len(prefix):]
    output_name = output_part.split(".", 1)[0]
    return shader_path, TextureOutput.from_output_name(output_name)


def _type_name(spec: Spec) -> str:
    value = spec.fields.get(FieldKey.TYPE_NAME.value)
    if value is None:
        return ""
    token = value.try_as(ValueType.TOKEN)
    return token if token is not None else ""


def _parse_material(specs: Specs, material_path: Path) -> Material:
    spec = specs[material_path]
    path_str = str(material_path)
    material = Material(prim_path=path_str, name=path_str.split("/")[-1])

    children = spec.fields.get(ChildrenKey.PRIM_CHILDREN.value)
    child_names = children.try_as(ValueType.TOKEN_VEC) if children is not None else None

    for child_name in child_names or ():
        child_path = Path(f"{path_str}/{child_name}")
        child_spec = specs.get(child_path)
        if child_spec is not None:
            _parse_shader_child(specs, child_path, child_spec, material)

    for texture in material.textures:
        if texture.file:
            material.texture_files[texture.prim_path] = texture.file

    return material


def _parse_shader_child(
    specs: Specs, shader_path: Path, shader_spec: Spec, material: Material
) -> None:
    if shader_spec.ty != SpecType.PRIM or _type_name(shader_spec) != "Shader":
        return

    shader_id = _shader_id(specs, shader_path)
    path_str = str(shader_path)
    if shader_id == "UsdPreviewSurface":
        material.surface = _parse_preview_surface(specs, path_str)
    elif shader_id == "UsdUVTexture":
        material.textures.append(_parse_uv_texture(specs, path_str))
    elif shader_id in _PRIMVAR_READER_IDS:
        material.primvar_readers.append(_parse_primvar_reader(specs, path_str))


def _shader_id(specs: Specs, shader_path: Path) -> str:
    spec = specs.get(Path(f"{shader_path}.info:id"))
    if spec is None:
        return ""
    value = spec.fields.get(FieldKey.DEFAULT.value)
    text = _text_of(value, ValueType.TOKEN, ValueType.STRING)
    return text if text is not None else ""


def _parse_preview_surface(specs: Specs, path_str: str) -> UsdPreviewSurface:
    def scalar(name: str, default: float) -> float:
        found = _float_attr(specs, path_str, name)
        return default if found is None else found

    use_specular = _int_attr(specs, path_str, "useSpecularWorkflow")
    return UsdPreviewSurface(
        prim_path=path_str,
        diffuse_color=_color_or_texture_slot(
            specs, path_str, "diffuseColor", (0.18, 0.18, 0.18, 1.0)
        ),
        metallic=_scalar_or_texture_slot(specs, path_str, "metallic", 0.0),
        roughness=_scalar_or_texture_slot(specs, path_str, "roughness", 0.5),
        emissive_color=_color_or_texture_slot(
            specs, path_str, "emissiveColor", (0.0, 0.0, 0.0, 1.0)
        ),
        opacity=_scalar_or_texture_slot(specs, path_str, "opacity", 1.0),
        normal=_optional_texture_slot(specs, path_str, "normal"),
        occlusion=_optional_texture_slot(specs, path_str, "occlusion"),
        opacity_threshold=scalar("opacityThreshold", 0.0),
        ior=scalar("ior", 1.5),
        clearcoat=scalar("clearcoat", 0.0),
        clearcoat_roughness=scalar("clearcoatRoughness", 0.01),
        specular=scalar("specular", 0.5),
        use_specular_workflow=(use_specular or 0) != 0,
    )


def _parse_uv_texture(specs: Specs, path_str: str) -> UsdUVTexture:
    texture = UsdUVTexture(prim_path=path_str)

    file = _text_attr(specs, path_str, "file", ValueType.ASSET_PATH, ValueType.STRING)
    if file is not None:
        texture.file = file.strip("@")

    wrap_s = _token_attr(specs, path_str, "wrapS")
    if wrap_s is not None:
        texture.wrap_s = WrapMode.from_token(wrap_s)
    wrap_t = _token_attr(specs, path_str, "wrapT")
    if wrap_t is not None:
        texture.wrap_t = WrapMode.from_token(wrap_t)

    texture.scale = _float4_attr(specs, path_str, "scale")
    texture.bias = _float4_attr(specs, path_str, "bias")
    texture.fallback = _float4_attr(specs, path_str, "fallback")

    color_space = _token_attr(specs, path_str, "sourceColorSpace")
    if color_space is not None:
        texture.source_color_space = SourceColorSpace.from_token(color_space)

    texture.st_connection = _connection(specs, path_str, "st")
    return texture


def _parse_primvar_reader(specs: Specs, path_str: str) -> UsdPrimvarReader:
    reader = UsdPrimvarReader(prim_path=path_str)
    varname = _token_attr(specs, path_str, "varname")
    if varname is not None:
        reader.varname = varname
    fallback = _vector_attr(specs, path_str, "fallback", ValueType.VEC2F, 2)
    reader.fallback = fallback  # type: ignore[assignment]
    return reader


def _texture_ref(connection: str) -> TextureRef:
    texture_path, output = parse_connection_path(connection)
    return TextureRef(texture_path=texture_path, output=output)


def _color_or_texture_slot(
    specs: Specs, shader_path: str, attr_name: str, default: Tuple[float, ...]
) -> TextureSlot:
    connection = _connection(specs, shader_path, attr_name)
    if connection is not None:
        return _texture_ref(connection)
    color = _vector_attr(specs, shader_path, attr_name, ValueType.VEC3F, 3)
    if color is not None:
        return ColorSlot((color[0], color[1], color[2], 1.0))
    return ColorSlot(tuple(default))  # type: ignore[arg-type]


def _scalar_or_texture_slot(
    specs: Specs, shader_path: str, attr_name: str, default: float
) -> TextureSlot:
    connection = _connection(specs, shader_path, attr_name)
    if connection is not None:
        return _texture_ref(connection)
    found = _float_attr(specs, shader_path, attr_name)
    return ScalarSlot(default if found is None else found)


def _optional_texture_slot(
    specs: Specs, shader_path: str, attr_name: str
) -> Optional[TextureSlot]:
    connection = _connection(specs, shader_path, attr_name)
    return _texture_ref(connection) if connection is not None else None


def _connection(specs: Specs, shader_path: str, attr_name: str) -> Optional[str]:
    """Return the first target of ``inputs:<attr_name>.connect``, if any."""
    spec = specs.get(Path(f"{shader_path}.inputs:{attr_name}.connect"))
    if spec is None:
        return None
    value = spec.fields.get(FieldKey.CONNECTION_PATHS.value)
    list_op = value.try_as(ValueType.PATH_LIST_OP) if value is not None else None
    if list_op is None or not list_op.explicit_items:
        return None
    return str(list_op.explicit_items[0])


def _default_value(specs: Specs, shader_path: str, attr_name: str) -> Optional[Value]:
    spec = specs.get(Path(f"{shader_path}.inputs:{attr_name}"))
    if spec is None:
        return None
    return spec.fields.get(FieldKey.DEFAULT.value)


def _text_of(value: Optional[Value], *kinds: ValueType) -> Optional[str]:
    if value is None:
        return None
    for kind in kinds:
        data = value.try_as(kind)
        if data is not None:
            return str(data)
    return None


def _text_attr(
    specs: Specs, shader_path: str, attr_name: str, *kinds: ValueType
) -> Optional[str]:
    return _text_of(_default_value(specs, shader_path, attr_name), *kinds)


def _token_attr(specs: Specs, shader_path: str, attr_name: str) -> Optional[str]:
    # Tokens may be stored as strings depending on where the specs came from.
    return _text_attr(specs, shader_path, attr_name, ValueType.TOKEN, ValueType.STRING)


def _float_attr(specs: Specs, shader_path: str, attr_name: str) -> Optional[float]:
    value = _default_value(specs, shader_path, attr_name)
    if value is None:
        return None
    for kind in (ValueType.FLOAT, ValueType.DOUBLE):
        data = value.try_as(kind)
        if data is not None:
            return float(data)
    return None


def _int_attr(specs: Specs, shader_path: str, attr_name: str) -> Optional[int]:
    value = _default_value(specs, shader_path, attr_name)
    if value is None:
        return None
    data = value.try_as(ValueType.INT)
    return int(data) if data is not None else None


def _vector_attr(
    specs: Specs, shader_path: str, attr_name: str, kind: ValueType, size: int
) -> Optional[Tuple[Any, ...]]:
    value = _default_value(specs, shader_path, attr_name)
    if value is None:
        return None
    data = value.try_as(kind)
    if data is None or len(data) < size:
        return None
    return tuple(data[:size])


def _float4_attr(specs: Specs, shader_path: str, attr_name: str) -> Optional[Float4]:
    return _vector_attr(specs, shader_path, attr_name, ValueType.VEC4F, 4)  # type: ignore[return-value]


__all__ = ["parse_materials", "parse_connection_path", "Float2"]