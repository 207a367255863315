# File: src/container_configurator/config/__init__.py

"""
Configuration package for the Container Configurator.
Provides a unified interface to the static catalog:
- Unit dimensions and face geometry
- Variant price table and picker options
- Rendering part keys and highlight colours
"""

from src.container_configurator.config.catalog import (
    BASE_PARTS,
    BASE_UNIT_PRICE,
    CURRENCY,
    FACE_AXIS,
    FACE_NORMALS,
    FACE_OFFSETS,
    HIGHLIGHT_COLORS,
    INITIAL_UNIT_POSITION,
    PRICE_TABLE,
    ROOF_PRICE,
    UNIT_DIMENSIONS,
    VARIANT_OPTIONS,
    WALL_FACES,
    Face,
    FaceVariant,
    UnitDimensions,
    VariantOption,
    face_offset,
)


def get_catalog_info() -> dict:
    """
    Returns a complete overview of the static catalog.
    Useful for debugging and for clients that render the variant picker.
    """
    return {
        "unit_dimensions": {
            "width": UNIT_DIMENSIONS.width,
            "height": UNIT_DIMENSIONS.height,
            "depth": UNIT_DIMENSIONS.depth,
        },
        "faces": {
            face.value: {
                "offset": list(FACE_OFFSETS[face]),
                "normal": list(FACE_NORMALS[face]),
                "axis": FACE_AXIS[face],
                "is_wall": face.is_wall,
            }
            for face in Face
        },
        "currency": CURRENCY,
        "base_unit_price": BASE_UNIT_PRICE,
        "roof_price": ROOF_PRICE,
        "price_table": {variant.value: price for variant, price in PRICE_TABLE.items()},
        "variant_options": [
            {
                "variant": option.variant.value,
                "label": option.label,
                "preview_image": option.preview_image,
                "surcharge": option.surcharge,
            }
            for option in VARIANT_OPTIONS
        ],
        "base_parts": list(BASE_PARTS),
        "highlight_colors": dict(HIGHLIGHT_COLORS),
    }


# When any module in the config package is run directly
if __name__ == "__main__":
    import json

    print("Current Catalog:")
    print(json.dumps(get_catalog_info(), indent=2))
