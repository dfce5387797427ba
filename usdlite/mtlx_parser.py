"""Reading MaterialX documents into :class:`MtlxDocument` structures."""

from __future__ import annotations

import logging
import math
import struct
import xml.etree.ElementTree as ET
from os import PathLike
from typing import Iterator, Optional, Union

from .mtlx_types import (
    GraphConnection,
    GraphOutput,
    ImageNode,
    MtlxDocument,
    NodeConnection,
    NodeGraph,
    NormalMapNode,
    ShaderInput,
    ShaderValue,
    ShaderValueKind,
    StandardSurface,
    SurfaceMaterial,
    ValueInput,
)

log = logging.getLogger(__name__)

_DEFAULT_VERSION = "1.38"

_STANDARD_SURFACE_INPUTS = frozenset(
    {
        "base_color",
        "base",
        "metalness",
        "specular_roughness",
        "specular",
        "specular_color",
        "normal",
        "emission_color",
        "emission",
        "opacity",
        "subsurface",
        "subsurface_color",
        "subsurface_radius",
        "subsurface_scale",
        "transmission",
        "coat",
        "coat_roughness",
    }
)


class MtlxError(ValueError):
    """Raised when a MaterialX document cannot be read or parsed."""


def parse_mtlx_file(file_path: Union[str, PathLike]) -> MtlxDocument:
    """Read and parse a MaterialX file from disk."""
    try:
        with open(file_path, encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MtlxError(f"Failed to read MaterialX file: {file_path}") from exc
    return parse_mtlx(content)


def parse_mtlx(content: str) -> MtlxDocument:
    """Parse MaterialX XML text into a document."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise MtlxError(f"Failed to parse MaterialX XML: {exc}") from exc

    root_name = _local_name(root.tag)
    if root_name != "materialx":
        raise MtlxError(f"Not a MaterialX document: root element is '{root_name}'")

    document = MtlxDocument(
        version=root.get("version", _DEFAULT_VERSION),
        colorspace=root.get("colorspace"),
    )

    for child in root:
        tag = _local_name(child.tag)
        if tag == "nodegraph":
            graph = _parse_nodegraph(child)
            if graph is not None:
                document.nodegraphs[graph.name] = graph
        elif tag == "standard_surface":
            shader = _parse_standard_surface(child)
            if shader is not None:
                document.standard_surfaces[shader.name] = shader
        elif tag == "surfacematerial":
            material = _parse_surface_material(child)
            if material is not None:
                document.materials[material.name] = material
        else:
            log.debug("Skipping unknown MaterialX element: %s", tag)

    log.debug(
        "Parsed MaterialX: %d nodegraphs, %d shaders, %d materials",
        len(document.nodegraphs),
        len(document.standard_surfaces),
        len(document.materials),
    )
    return document


def _local_name(tag: object) -> str:
    """Return an element tag without any namespace prefix."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _inputs(element: ET.Element) -> Iterator[ET.Element]:
    return (child for child in element if _local_name(child.tag) == "input")


def _parse_nodegraph(element: ET.Element) -> Optional[NodeGraph]:
    name = element.get("name")
    if name is None:
        return None
    graph = NodeGraph(name=name)

    for child in element:
        tag = _local_name(child.tag)
        if tag == "image":
            image = _parse_image_node(child)
            if image is not None:
                graph.image_nodes[image.name] = image
        elif tag == "normalmap":
            normalmap = _parse_normalmap_node(child)
            if normalmap is not None:
                graph.normalmap_nodes[normalmap.name] = normalmap
        elif tag == "output":
            output = _parse_graph_output(child)
            if output is not None:
                graph.outputs[output.name] = output

    return graph


def _parse_image_node(element: ET.Element) -> Optional[ImageNode]:
    name = element.get("name")
    if name is None:
        return None
    output_type = element.get("type", "color3")

    file = ""
    colorspace = None
    for entry in _inputs(element):
        if entry.get("name") == "file":
            file = entry.get("value", "")
            colorspace = entry.get("colorspace")

    if not file:
        log.warning("Image node '%s' has no file input", name)
        return None

    return ImageNode(name=name, output_type=output_type, file=file, colorspace=colorspace)


def _parse_normalmap_node(element: ET.Element) -> Optional[NormalMapNode]:
    name = element.get("name")
    if name is None:
        return None

    input_node = ""
    for entry in _inputs(element):
        if entry.get("name") == "in":
            input_node = entry.get("nodename", "")

    if not input_node:
        return None
    return NormalMapNode(name=name, input_node=input_node)


def _parse_graph_output(element: ET.Element) -> Optional[GraphOutput]:
    name = element.get("name")
    nodename = element.get("nodename")
    if name is None or nodename is None:
        return None
    return GraphOutput(name=name, output_type=element.get("type", "color3"), nodename=nodename)


def _parse_standard_surface(element: ET.Element) -> Optional[StandardSurface]:
    name = element.get("name")
    if name is None:
        return None
    shader = StandardSurface(name=name)

    for entry in _inputs(element):
        input_name = entry.get("name")
        if input_name is None:
            continue
        shader_input = _parse_shader_input(entry)
        if input_name in _STANDARD_SURFACE_INPUTS:
            setattr(shader, input_name, shader_input)
        else:
            log.debug("Skipping unknown standard_surface input: %s", input_name)

    return shader


def _parse_shader_input(element: ET.Element) -> Optional[ShaderInput]:
    nodegraph = element.get("nodegraph")
    if nodegraph is not None:
        return GraphConnection(nodegraph=nodegraph, output=element.get("output", "out"))

    nodename = element.get("nodename")
    if nodename is not None:
        return NodeConnection(nodename=nodename)

    value_str = element.get("value")
    if value_str is not None:
        return _parse_value(value_str, element.get("type", "float"))

    return None


def _parse_f32(text: str) -> Optional[float]:
    """Parse text as a single-precision float, strictly (no spaces or underscores)."""
    if not text or "_" in text or text != text.strip():
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return number
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _parse_components(text: str) -> list:
    parsed = (_parse_f32(part.strip()) for part in text.split(","))
    return [value for value in parsed if value is not None]


def _parse_value(value_str: str, value_type: str) -> Optional[ShaderInput]:
    if value_type in ("color3", "vector3"):
        parts = _parse_components(value_str)
        if len(parts) < 3:
            return None
        kind = ShaderValueKind.COLOR3 if value_type == "color3" else ShaderValueKind.VECTOR3
        return ValueInput(ShaderValue(kind, tuple(parts[:3])))

    if value_type == "color4":
        parts = _parse_components(value_str)
        if len(parts) < 4:
            return None
        return ValueInput(ShaderValue(ShaderValueKind.COLOR4, tuple(parts[:4])))

    # "float" and any other type are read as a single float.
    number = _parse_f32(value_str)
    if number is None:
        return None
    return ValueInput(ShaderValue(ShaderValueKind.FLOAT, number))


def _parse_surface_material(element: ET.Element) -> Optional[SurfaceMaterial]:
    name = element.get("name")
    if name is None:
        return None

    shader_name = ""
    for entry in _inputs(element):
        if entry.get("name") == "surfaceshader":
            shader_name = entry.get("nodename", "")

    if not shader_name:
        log.warning("Surface material '%s' has no shader reference", name)
        return None

    return SurfaceMaterial(name=name, shader_name=shader_name)