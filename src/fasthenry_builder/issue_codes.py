# src/fasthenry_builder/issue_codes.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class IssueCode(Enum):
    """
    Registry of issue codes and their message templates.
    Each enum member's value is a tuple: (code_str, message_template_str).
    """

    # --- Model Construction (MODEL_...) ---
    MODEL_UNIT_INVALID = ("MODEL_UNIT_INVALID", "Unit '{unit}' is not supported. Use one of: {supported_units}.")

    # --- Segment Configuration (SEG_...) ---
    SEG_CONFIG_TYPE = ("SEG_CONFIG_TYPE", "A segment needs a configuration record (SegmentConfig, mapping or keyword fields); received {received}.")
    SEG_ENDPOINTS_MISSING = ("SEG_ENDPOINTS_MISSING", "Need the sn1, sn2, en1 and en2 nodes between which the segment connects.")
    SEG_COORDINATE_INVALID = ("SEG_COORDINATE_INVALID", "sn1 and sn2 need to be coordinates with finite numeric x, y and z.")
    SEG_NODE_NAME_INVALID = ("SEG_NODE_NAME_INVALID", "en1 and en2 need to be electrical node names given as strings.")
    SEG_DIMENSIONS_MISSING = ("SEG_DIMENSIONS_MISSING", "Need numeric w (width) and h (height) for the segment.")
    SEG_MATERIAL_INVALID = ("SEG_MATERIAL_INVALID", "Exactly one of sigma (conductivity) or rho (resistivity) must be given, as a number.")
    SEG_EXTENSION_INCOMPLETE = ("SEG_EXTENSION_INCOMPLETE", "wx, wy and wz should all be given if any one of them is specified.")
    SEG_EXTENSION_INVALID = ("SEG_EXTENSION_INVALID", "wx, wy and wz should be numbers.")
    SEG_FILAMENT_OVERRIDE_INVALID = ("SEG_FILAMENT_OVERRIDE_INVALID", "nhinc and nwinc should be integers >= 1; rh and rw should be numbers.")
    SEG_UNKNOWN_FIELD = ("SEG_UNKNOWN_FIELD", "The segment configuration contains fields that are not understood.")

    # --- Ports (PORT...) ---
    PORT_DEFINITION_INVALID = ("PORT_DEFINITION_INVALID", "Each port should be a pair of two electrical node names given as strings.")
    PORTS_UNDEFINED = ("PORTS_UNDEFINED", "No ports have been defined for the network. Define the ports first.")
    PORTS_EMPTY = ("PORTS_EMPTY", "The port list is empty; the input file will not declare any .external port.")
    PORT_NODE_UNDEFINED = ("PORT_NODE_UNDEFINED", "Port {port_index} refers to electrical node '{node_name}', which is not used by any segment.")
    PORT_SHORTED = ("PORT_SHORTED", "Port {port_index} connects electrical node '{node_name}' to itself.")
    PORT_NO_PATH = ("PORT_NO_PATH", "Port {port_index} terminals '{en1}' and '{en2}' are not joined by any conductor path.")

    # --- Frequency Sweep (SWEEP_...) ---
    SWEEP_INVALID = ("SWEEP_INVALID", "Invalid frequency sweep: {reason}")
    SWEEP_UNDEFINED = ("SWEEP_UNDEFINED", "No frequency sweep has been set for the network.")

    # --- Network (NETWORK_...) ---
    NETWORK_EMPTY = ("NETWORK_EMPTY", "The network has no segments.")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def template(self) -> str:
        return self.value[1]

    def format_message(self, **kwargs) -> str:
        """Formats the message template with provided keyword arguments."""
        try:
            return self.template.format(**kwargs)
        except KeyError as e:
            logger.error(f"Missing key {e} for formatting message template of {self.name} (code: {self.code}): '{self.template}'. Provided args: {kwargs}")
            return f"Error formatting message for {self.code}: Missing key {e}. Template: '{self.template}' Args: {kwargs}"
