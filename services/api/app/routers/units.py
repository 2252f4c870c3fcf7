"""
Router for unit conversion and unit discovery.
"""

import logging
import math

from fastapi import APIRouter, HTTPException

from ..schemas import ConversionRequest, ConversionResponse
from ..services.categories import Category, get_converter
from ..services.unit_conversion import InvalidUnitError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{category}", response_model=ConversionResponse)
def convert_units(category: Category, req: ConversionRequest):
    """
    Convert a value from one unit to another within a category.
    """
    converter = get_converter(category)

    # NaN and inf have no JSON number form
    if not math.isfinite(req.value):
        raise HTTPException(status_code=422, detail="value must be a finite number")

    try:
        from_unit = converter.parse_unit(req.from_unit)
        to_unit = converter.parse_unit(req.to_unit)
    except InvalidUnitError as e:
        logger.warning(f"Rejected {category.value} conversion: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    result = converter.convert(req.value, from_unit, to_unit)
    if not math.isfinite(result):
        logger.warning(f"Rejected {category.value} conversion: {req.value} {from_unit.value} overflows {to_unit.value}")
        raise HTTPException(status_code=400, detail=f"{req.value} {from_unit.value} is out of range in {to_unit.value}")
    logger.info(f"Converted {category.value}: {req.value} {from_unit.value} -> {result} {to_unit.value}")

    return ConversionResponse(
        result=result,
        original_value=req.value,
        from_unit=req.from_unit,
        to_unit=req.to_unit,
        from_unit_symbol=converter.unit_symbol(from_unit),
        to_unit_symbol=converter.unit_symbol(to_unit),
    )


@router.get("/{category}/units", response_model=list[str])
def list_units(category: Category):
    """Unit names for a category, in declaration order."""
    return get_converter(category).all_unit_names()


@router.get("/{category}/symbols", response_model=dict[str, str])
def list_unit_symbols(category: Category):
    """Unit name -> display symbol for a category."""
    return get_converter(category).all_unit_symbols()
