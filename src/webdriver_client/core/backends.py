"""Per-driver protocol variations, selected when a client is constructed."""

from dataclasses import dataclass
from typing import Callable

# Element reference key defined by the W3C WebDriver spec
W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"


def w3c_input_body(text: str) -> dict:
    return {"text": text}


def legacy_input_body(text: str) -> dict:
    return {"value": [text]}


@dataclass(frozen=True)
class DriverBackend:
    """
    Protocol differences between WebDriver-compatible servers.

    Attributes:
        name: Backend name used in configuration
        element_id_path: JSONPath locating the element reference in a find-element response
        input_body_builder: Builds the send-keys request body for a piece of text
        property_path_segment: "property" (W3C) or "attribute" (legacy drivers)
        wait_interval_ms: Default delay before each readiness poll
    """

    name: str
    element_id_path: str
    input_body_builder: Callable[[str], dict]
    property_path_segment: str = "property"
    wait_interval_ms: int = 0

    def input_body(self, text: str) -> dict:
        return self.input_body_builder(text)


W3C = DriverBackend(
    name="w3c",
    element_id_path=f"$..'{W3C_ELEMENT_KEY}'",
    input_body_builder=w3c_input_body,
)

CHROME = DriverBackend(
    name="chrome",
    element_id_path="$..ELEMENT",
    input_body_builder=legacy_input_body,
    property_path_segment="attribute",
)

MSEDGE = DriverBackend(
    name="msedge",
    element_id_path="$..ELEMENT",
    input_body_builder=legacy_input_body,
    property_path_segment="attribute",
)

SAFARI = DriverBackend(
    name="safari",
    element_id_path=W3C.element_id_path,
    input_body_builder=w3c_input_body,
    wait_interval_ms=1000,
)

BACKENDS: dict[str, DriverBackend] = {
    "w3c": W3C,
    "gecko": W3C,
    "chrome": CHROME,
    "msedge": MSEDGE,
    "safari": SAFARI,
}


def get_backend(name: str) -> DriverBackend:
    """
    Look up a backend preset by name (case-insensitive).

    Raises:
        ValueError: If the backend is not supported
    """
    key = name.lower()
    if key not in BACKENDS:
        raise ValueError(
            f"Unsupported backend: {name}. "
            f"Supported backends: {list(BACKENDS.keys())}"
        )
    return BACKENDS[key]
