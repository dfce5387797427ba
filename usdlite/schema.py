"""Names of the fields and child lists registered by scene description."""

from __future__ import annotations

from enum import Enum


class FieldKey(str, Enum):
    """Pre-registered field names."""

    ACTIVE = "active"
    ALLOWED_TOKENS = "allowedTokens"
    ASSET_INFO = "assetInfo"
    COLOR_CONFIGURATION = "colorConfiguration"
    COLOR_MANAGEMENT_SYSTEM = "colorManagementSystem"
    COLOR_SPACE = "colorSpace"
    COMMENT = "comment"
    CONNECTION_PATHS = "connectionPaths"
    CUSTOM = "custom"
    CUSTOM_DATA = "customData"
    CUSTOM_LAYER_DATA = "customLayerData"
    DEFAULT = "default"
    DEFAULT_PRIM = "defaultPrim"
    DISPLAY_GROUP = "displayGroup"
    DISPLAY_GROUP_ORDER = "displayGroupOrder"
    DISPLAY_NAME = "displayName"
    DISPLAY_UNIT = "displayUnit"
    DOCUMENTATION = "documentation"
    END_TIME_CODE = "endTimeCode"
    EXPRESSION_VARIABLES = "expressionVariables"
    FRAME_PRECISION = "framePrecision"
    FRAMES_PER_SECOND = "framesPerSecond"
    HIDDEN = "hidden"
    HAS_OWNED_SUB_LAYERS = "hasOwnedSubLayers"
    INHERIT_PATHS = "inheritPaths"
    INSTANCEABLE = "instanceable"
    KIND = "kind"
    LAYER_RELOCATES = "layerRelocates"
    PRIM_ORDER = "primOrder"
    NO_LOAD_HINT = "noLoadHint"
    OWNER = "owner"
    PAYLOAD = "payload"
    PERMISSION = "permission"
    PREFIX = "prefix"
    PREFIX_SUBSTITUTIONS = "prefixSubstitutions"
    PROPERTY_ORDER = "propertyOrder"
    REFERENCES = "references"
    RELOCATES = "relocates"
    SESSION_OWNER = "sessionOwner"
    SPECIALIZES = "specializes"
    SPECIFIER = "specifier"
    START_TIME_CODE = "startTimeCode"
    SUB_LAYERS = "subLayers"
    SUB_LAYER_OFFSETS = "subLayerOffsets"
    SUFFIX = "suffix"
    SUFFIX_SUBSTITUTIONS = "suffixSubstitutions"
    SYMMETRIC_PEER = "symmetricPeer"
    SYMMETRY_ARGS = "symmetryArgs"
    SYMMETRY_ARGUMENTS = "symmetryArguments"
    SYMMETRY_FUNCTION = "symmetryFunction"
    TARGET_PATHS = "targetPaths"
    TIME_SAMPLES = "timeSamples"
    TIME_CODES_PER_SECOND = "timeCodesPerSecond"
    TYPE_NAME = "typeName"
    VARIANT_SELECTION = "variantSelection"
    VARIABILITY = "variability"
    VARIANT_SET_NAMES = "variantSetNames"
    END_FRAME = "endFrame"
    START_FRAME = "startFrame"

    def as_str(self) -> str:
        """Return the field name as stored in files."""
        return self.value

    def __str__(self) -> str:
        return self.value


class ChildrenKey(str, Enum):
    """Field names that list the children of a spec."""

    CONNECTION_CHILDREN = "connectionChildren"
    EXPRESSION_CHILDREN = "expressionChildren"
    MAPPER_ARG_CHILDREN = "mapperArgChildren"
    MAPPER_CHILDREN = "mapperChildren"
    PRIM_CHILDREN = "primChildren"
    PROPERTY_CHILDREN = "properties"
    RELATIONSHIP_TARGET_CHILDREN = "targetChildren"
    VARIANT_CHILDREN = "variantChildren"
    VARIANT_SET_CHILDREN = "variantSetChildren"

    def as_str(self) -> str:
        """Return the field name as stored in files."""
        return self.value

    def __str__(self) -> str:
        return self.value