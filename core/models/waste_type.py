# =============================================================================
# core/models/waste_type.py - Waste Type Schemas
# =============================================================================
# A waste type is a category of material (plastic, glass, organic...) with
# disposal guidance. Collection points link to the types they accept.
# =============================================================================

from pydantic import BaseModel, Field


class WasteTypeCreate(BaseModel):
    """
    Schema for creating a waste type (admin only).

    Example:
        {
            "name": "Vetro",
            "description": "Bottiglie e contenitori in vetro",
            "color": "#228B22",
            "icon_name": "wine-bottle"
        }
    """

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    color: str = Field(
        default="#808080",
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Hex color used on maps and badges"
    )
    icon_name: str | None = Field(default=None, max_length=64)
    disposal_info: str | None = Field(
        default=None,
        max_length=2000,
        description="How to prepare and dispose of this material"
    )
    examples: str | None = Field(
        default=None,
        max_length=2000,
        description="Comma-separated examples of items of this type"
    )


class WasteTypeResponse(WasteTypeCreate):
    """Waste type as stored."""

    id: int
