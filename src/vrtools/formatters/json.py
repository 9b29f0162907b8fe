"""JSON output formatter."""

from pydantic import BaseModel


def format_json(model: BaseModel, indent: int = 2) -> str:
    """Format a result or report as JSON string.

    Args:
        model: ConversionResult or XMPReport
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return model.model_dump_json(indent=indent)

