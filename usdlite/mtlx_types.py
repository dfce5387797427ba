"""Data types for parsed MaterialX documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class ShaderValueKind(Enum):
    """Kinds of constant shader values."""

    FLOAT = "float"
    COLOR3 = "color3"
    VECTOR3 = "vector3"
    COLOR4 = "color4"


@dataclass(frozen=True)
class ShaderValue:
    """A constant shader value: a float or a tuple of components."""

    kind: ShaderValueKind
    value: Union[float, Tuple[float, ...]]

    def as_float(self) -> float:
        """Return the value as a float, taking the first component of vectors."""
        if self.kind is ShaderValueKind.FLOAT:
            return float(self.value)
        return self.value[0]

    def as_color3(self) -> Tuple[float, float, float]:
        """Return the value as an RGB triple, expanding a float to grey."""
        if self.kind is ShaderValueKind.FLOAT:
            f = float(self.value)
            return (f, f, f)
        r, g, b = self.value[:3]
        return (r, g, b)


@dataclass(frozen=True)
class ValueInput:
    """A shader input holding a constant value."""

    value: ShaderValue


@dataclass(frozen=True)
class GraphConnection:
    """A shader input connected to a node graph output."""

    nodegraph: str
    output: str


@dataclass(frozen=True)
class NodeConnection:
    """A shader input connected directly to a node in the same scope."""

    nodename: str


ShaderInput = Union[ValueInput, GraphConnection, NodeConnection]


@dataclass
class ImageNode:
    """An image texture sampling node."""

    name: str
    output_type: str
    file: str
    colorspace: Optional[str] = None


@dataclass
class NormalMapNode:
    """A normal map processing node."""

    name: str
    input_node: str


@dataclass
class GraphOutput:
    """An output of a node graph."""

    name: str
    output_type: str
    nodename: str


@dataclass
class NodeGraph:
    """A node graph holding image nodes, normal map nodes and outputs."""

    name: str = ""
    image_nodes: Dict[str, ImageNode] = field(default_factory=dict)
    normalmap_nodes: Dict[str, NormalMapNode] = field(default_factory=dict)
    outputs: Dict[str, GraphOutput] = field(default_factory=dict)


@dataclass
class StandardSurface:
    """A Standard Surface shader with its recognised inputs."""

    name: str = ""
    base_color: Optional[ShaderInput] = None
    base: Optional[ShaderInput] = None
    metalness: Optional[ShaderInput] = None
    specular_roughness: Optional[ShaderInput] = None
    specular: Optional[ShaderInput] = None
    specular_color: Optional[ShaderInput] = None
    normal: Optional[ShaderInput] = None
    emission_color: Optional[ShaderInput] = None
    emission: Optional[ShaderInput] = None
    opacity: Optional[ShaderInput] = None
    subsurface: Optional[ShaderInput] = None
    subsurface_color: Optional[ShaderInput] = None
    subsurface_radius: Optional[ShaderInput] = None
    subsurface_scale: Optional[ShaderInput] = None
    transmission: Optional[ShaderInput] = None
    coat: Optional[ShaderInput] = None
    coat_roughness: Optional[ShaderInput] = None


@dataclass
class SurfaceMaterial:
    """A material that names the surface shader it uses."""

    name: str
    shader_name: str


@dataclass
class MtlxDocument:
    """A parsed MaterialX document."""

    version: str = ""
    colorspace: Optional[str] = None
    nodegraphs: Dict[str, NodeGraph] = field(default_factory=dict)
    standard_surfaces: Dict[str, StandardSurface] = field(default_factory=dict)
    materials: Dict[str, SurfaceMaterial] = field(default_factory=dict)

    def get_material(self, name: str) -> Optional[SurfaceMaterial]:
        return self.materials.get(name)

    def get_shader(self, name: str) -> Optional[StandardSurface]:
        return self.standard_surfaces.get(name)

    def get_nodegraph(self, name: str) -> Optional[NodeGraph]:
        return self.nodegraphs.get(name)

    def resolve_texture_path(self, shader_input: ShaderInput) -> Optional[str]:
        """Return the texture file a node graph connection leads to, if any.

        A connection through a normal map node is followed to its image node.
        """
        if not isinstance(shader_input, GraphConnection):
            return None
        graph = self.nodegraphs.get(shader_input.nodegraph)
        if graph is None:
            return None
        output = graph.outputs.get(shader_input.output)
        if output is None:
            return None

        normalmap = graph.normalmap_nodes.get(output.nodename)
        image_name = normalmap.input_node if normalmap is not None else output.nodename
        image = graph.image_nodes.get(image_name)
        return image.file if image is not None else None