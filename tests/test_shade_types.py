import pytest

from usdlite.shade_types import (
    ColorSlot,
    Material,
    ScalarSlot,
    SourceColorSpace,
    TextureOutput,
    TextureRef,
    UsdPreviewSurface,
    UsdPrimvarReader,
    UsdUVTexture,
    WrapMode,
    resolve_uv_set,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("repeat", WrapMode.REPEAT),
        ("Clamp", WrapMode.CLAMP),
        ("MIRROR", WrapMode.MIRROR),
        ("black", WrapMode.BLACK),
        ("unknown", WrapMode.REPEAT),
    ],
)
def test_wrap_mode_from_token(token, expected):
    assert WrapMode.from_token(token) is expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ("auto", SourceColorSpace.AUTO),
        ("raw", SourceColorSpace.RAW),
        ("sRGB", SourceColorSpace.SRGB),
        ("linear", SourceColorSpace.RAW),
        ("whatever", SourceColorSpace.AUTO),
    ],
)
def test_source_color_space_from_token(token, expected):
    assert SourceColorSpace.from_token(token) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("rgb", TextureOutput.RGB),
        ("r", TextureOutput.R),
        ("G", TextureOutput.G),
        ("a", TextureOutput.A),
        ("b", TextureOutput.B),
        ("result", TextureOutput.RGB),
    ],
)
def test_texture_output_from_name(name, expected):
    assert TextureOutput.from_output_name(name) is expected


@pytest.mark.parametrize(
    "varname, expected",
    [
        ("st", 0),
        ("st0", 0),
        ("st1", 1),
        ("UVMap", 0),
        ("st2", 2),
        ("map4", 3),
        ("UVMap1", 1),
        ("something", 0),
    ],
)
def test_resolve_uv_set(varname, expected):
    assert resolve_uv_set(varname) == expected


def test_material_get_texture_paths():
    mat = Material()
    mat.textures.append(UsdUVTexture(file="diffuse.png"))
    mat.textures.append(UsdUVTexture(file="normal.png"))
    mat.textures.append(UsdUVTexture(file=""))

    paths = mat.get_texture_paths()
    assert len(paths) == 2
    assert "diffuse.png" in paths
    assert "normal.png" in paths


def test_material_lookup_by_path():
    tex = UsdUVTexture(prim_path="/Mat/Tex", file="a.png")
    reader = UsdPrimvarReader(prim_path="/Mat/Reader", varname="st1")
    mat = Material(textures=[tex], primvar_readers=[reader])

    assert mat.get_texture("/Mat/Tex") is tex
    assert mat.get_texture("/Mat/Missing") is None
    assert mat.get_primvar_reader("/Mat/Reader") is reader
    assert mat.get_primvar_reader("/Mat/Tex") is None


def test_get_uv_set_follows_connection():
    readers = [
        UsdPrimvarReader(prim_path="/Mat/Reader0", varname="st"),
        UsdPrimvarReader(prim_path="/Mat/Reader1", varname="st1"),
    ]
    tex = UsdUVTexture(st_connection="</Mat/Reader1.outputs:result>")
    assert tex.get_uv_set(readers) == 1

    plain = UsdUVTexture(st_connection="/Mat/Reader1.outputs:result")
    assert plain.get_uv_set(readers) == 1


def test_get_uv_set_defaults_to_zero():
    readers = [UsdPrimvarReader(prim_path="/Mat/Reader", varname="st2")]
    assert UsdUVTexture().get_uv_set(readers) == 0
    missing = UsdUVTexture(st_connection="</Mat/Other.outputs:result>")
    assert missing.get_uv_set(readers) == 0


def test_defaults():
    tex = UsdUVTexture()
    assert tex.wrap_s is WrapMode.REPEAT
    assert tex.wrap_t is WrapMode.REPEAT
    assert tex.source_color_space is SourceColorSpace.AUTO
    assert UsdPrimvarReader().varname == "st"

    surface = UsdPreviewSurface()
    assert surface.diffuse_color == ColorSlot((0.18, 0.18, 0.18, 1.0))
    assert surface.metallic == ScalarSlot(0.0)
    assert surface.roughness == ScalarSlot(0.5)
    assert surface.emissive_color == ColorSlot((0.0, 0.0, 0.0, 1.0))
    assert surface.opacity == ScalarSlot(1.0)
    assert surface.ior == 1.5
    assert surface.clearcoat_roughness == 0.01
    assert surface.specular == 0.5
    assert surface.use_specular_workflow is False
    assert surface.normal is None


def test_texture_ref_equality():
    ref = TextureRef("/Mat/Tex", TextureOutput.R)
    assert ref == TextureRef("/Mat/Tex", TextureOutput.R)
    assert TextureRef("/Mat/Tex").output is TextureOutput.RGB
    assert ColorSlot().color == (0.5, 0.5, 0.5, 1.0)