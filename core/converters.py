import math
from typing import Union
from .errors import NotFound, OutOfRange
from .models import System, GroundWire

def parse_system(val: Union[str, System]) -> System:
    """
    Maps user spellings of the voltage system to System.
    Accepts 1Φ / 1P / 1 / single and 3Φ / 3P / 3 / three.
    """
    if isinstance(val, System):
        return val
    key = str(val).strip().upper().replace("Ø", "Φ")

    if key in ["1Φ", "1P", "1PH", "1", "SINGLE", "SINGLE-PHASE"]: return System.SINGLE_PHASE
    if key in ["3Φ", "3P", "3PH", "3", "THREE", "THREE-PHASE"]: return System.THREE_PHASE

    raise NotFound(f"Unknown voltage system: {val!r}")

def parse_ground_wire(val: Union[str, GroundWire, None]) -> GroundWire:
    """Ground wire option. Blank means no ground wire."""
    if isinstance(val, GroundWire):
        return val
    key = (val or "").strip().lower()

    if key in ["", "none", "no"]: return GroundWire.NONE
    if key in ["same", "same-size", "full"]: return GroundWire.SAME_SIZE
    # Older front-ends sent the ground wire cable type instead of an option
    if key in ["reduced", "reduced-size", "hfix"]: return GroundWire.REDUCED_SIZE

    raise NotFound(f"Unknown ground wire option: {val!r}")

def parse_size(val: Union[str, float, int]) -> float:
    """Returns the nominal cross-section in mm² ("95", "95 mm²", 95 -> 95.0)."""
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        size = float(val)
    else:
        text = str(val).strip().lower().replace("mm²", "").replace("mm2", "").strip()
        try:
            size = float(text)
        except ValueError:
            raise OutOfRange(f"Not a conductor size: {val!r}") from None
    if not math.isfinite(size) or size <= 0:
        raise OutOfRange(f"Conductor size must be positive: {val!r}")
    return size

def format_size(size: float) -> str:
    """95.0 -> "95", 2.5 -> "2.5"."""
    return f"{size:g}"

def circle_area(diameter_mm: float) -> float:
    return math.pi * (diameter_mm / 2.0) ** 2

def parse_quantity(val: Union[str, int, None]) -> int:
    """Number of identical cables. Blank means one."""
    if val is None or (isinstance(val, str) and not val.strip()):
        return 1
    try:
        qty = int(str(val).strip())
    except ValueError:
        raise OutOfRange(f"Quantity must be a whole number: {val!r}") from None
    if qty <= 0:
        raise OutOfRange(f"Quantity must be at least 1, got {qty}")
    return qty
