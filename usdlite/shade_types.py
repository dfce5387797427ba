"""Data types for USD shading schemas: surfaces, textures and primvar readers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union

Color4 = Tuple[float, float, float, float]
Float4 = Tuple[float, float, float, float]
Float2 = Tuple[float, float]


class WrapMode(Enum):
    """Texture wrap mode, as in ``inputs:wrapS`` and ``inputs:wrapT``."""

    REPEAT = "repeat"
    CLAMP = "clamp"
    MIRROR = "mirror"
    BLACK = "black"

    @classmethod
    def from_token(cls, token: str) -> WrapMode:
        """Parse a wrap mode token case-insensitively; unknown tokens mean repeat."""
        lowered = token.lower()
        for mode in cls:
            if mode.value == lowered:
                return mode
        return cls.REPEAT


class SourceColorSpace(Enum):
    """How texture values are interpreted, as in ``inputs:sourceColorSpace``."""

    AUTO = "auto"
    RAW = "raw"
    SRGB = "sRGB"

    @classmethod
    def from_token(cls, token: str) -> SourceColorSpace:
        """Parse a colour space token case-insensitively; unknown tokens mean auto."""
        lowered = token.lower()
        if lowered in ("raw", "linear"):
            return cls.RAW
        if lowered == "srgb":
            return cls.SRGB
        return cls.AUTO


class TextureOutput(Enum):
    """The output channel a connection reads from a texture."""

    RGB = "rgb"
    R = "r"
    G = "g"
    B = "b"
    A = "a"

    @classmethod
    def from_output_name(cls, name: str) -> TextureOutput:
        """Parse an output name such as ``r`` or ``rgb``; unknown names mean RGB."""
        lowered = name.lower()
        for output in cls:
            if output.value == lowered:
                return output
        return cls.RGB


@dataclass(frozen=True)
class TextureRef:
    """A slot connected to a texture shader, with the channel it uses."""

    texture_path: str
    output: TextureOutput = TextureOutput.RGB


@dataclass(frozen=True)
class ColorSlot:
    """A slot holding a constant RGBA colour."""

    color: Color4 = (0.5, 0.5, 0.5, 1.0)


@dataclass(frozen=True)
class ScalarSlot:
    """A slot holding a constant scalar."""

    value: float = 0.0


TextureSlot = Union[TextureRef, ColorSlot, ScalarSlot]


def resolve_uv_set(varname: str) -> int:
    """Map a primvar name to a texture coordinate set index."""
    lowered = varname.lower()
    if lowered in ("st1", "uvmap1", "map2"):
        return 1
    if lowered in ("st2", "uvmap2", "map3"):
        return 2
    if lowered in ("st3", "uvmap3", "map4"):
        return 3
    return 0


@dataclass
class UsdPrimvarReader:
    """A primvar reader shader, most often reading texture coordinates."""

    prim_path: str = ""
    varname: str = "st"
    fallback: Optional[Float2] = None


@dataclass
class UsdUVTexture:
    """A texture sampling shader."""

    prim_path: str = ""
    file: str = ""
    wrap_s: WrapMode = WrapMode.REPEAT
    wrap_t: WrapMode = WrapMode.REPEAT
    scale: Optional[Float4] = None
    bias: Optional[Float4] = None
    fallback: Optional[Float4] = None
    source_color_space: SourceColorSpace = SourceColorSpace.AUTO
    st_connection: Optional[str] = None

    def get_uv_set(self, primvar_readers: Iterable[UsdPrimvarReader]) -> int:
        """Return the UV set index of the primvar reader feeding ``st``, or 0."""
        if self.st_connection is None:
            return 0
        shader_path = self.st_connection.lstrip("<").rstrip(">").split(".", 1)[0]
        reader = next(
            (r for r in primvar_readers if r.prim_path == shader_path), None
        )
        return resolve_uv_set(reader.varname) if reader is not None else 0


@dataclass
class UsdPreviewSurface:
    """The standard physically based preview surface shader."""

    prim_path: str = ""
    diffuse_color: TextureSlot = field(
        default_factory=lambda: ColorSlot((0.18, 0.18, 0.18, 1.0))
    )
    metallic: TextureSlot = field(default_factory=lambda: ScalarSlot(0.0))
    roughness: TextureSlot = field(default_factory=lambda: ScalarSlot(0.5))
    normal: Optional[TextureSlot] = None
    occlusion: Optional[TextureSlot] = None
    emissive_color: TextureSlot = field(
        default_factory=lambda: ColorSlot((0.0, 0.0, 0.0, 1.0))
    )
    opacity: TextureSlot = field(default_factory=lambda: ScalarSlot(1.0))
    opacity_threshold: float = 0.0
    ior: float = 1.5
    clearcoat: float = 0.0
    clearcoat_roughness: float = 0.01
    specular: float = 0.5
    use_specular_workflow: bool = False


@dataclass
class Material:
    """A material with its surface shader, textures and primvar readers."""

    prim_path: str = ""
    name: str = ""
    surface: Optional[UsdPreviewSurface] = None
    textures: List[UsdUVTexture] = field(default_factory=list)
    primvar_readers: List[UsdPrimvarReader] = field(default_factory=list)
    texture_files: Dict[str, str] = field(default_factory=dict)

    def get_texture_paths(self) -> List[str]:
        """Return the non-empty texture file paths, in texture order."""
        return [texture.file for texture in self.textures if texture.file]

    def get_texture(self, prim_path: str) -> Optional[UsdUVTexture]:
        """Return the texture shader at ``prim_path``, if any."""
        return next((t for t in self.textures if t.prim_path == prim_path), None)

    def get_primvar_reader(self, prim_path: str) -> Optional[UsdPrimvarReader]:
        """Return the primvar reader at ``prim_path``, if any."""
        return next(
            (r for r in self.primvar_readers if r.prim_path == prim_path), None
        )