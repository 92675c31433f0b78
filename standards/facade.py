"""
Boundary used by the UI collaborators (app.py, main.py).

Every function takes and returns plain values: strings, numbers, lists,
tuples and dicts. Codes are checked for shape here, the catalog decides
whether they exist.
"""
import re
from dataclasses import replace
from typing import List, Mapping, Tuple, Union

from core.converters import parse_ground_wire, parse_quantity, parse_size, parse_system
from core.errors import Incomplete, NotFound
from core.models import CalculationRequest, CalculationResult
from standards import selector
from standards.catalog import default_catalog
from standards.kec import KECCalculator

CABLE_TYPE_PATTERN = re.compile(r"^[A-Z][A-Z0-9]*(-[A-Z0-9]+)*$")
CORES_PATTERN = re.compile(r"^[1-9]C$")
METHOD_PATTERN = re.compile(r"^[A-G][0-9]?$")

_calculator = KECCalculator(default_catalog())


def _check_code(value, pattern, field: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise Incomplete(f"{field} has not been selected")
    if not isinstance(value, str) or not pattern.match(value.strip()):
        raise NotFound(f"Malformed {field}: {value!r}")
    return value.strip()


def list_cable_types() -> List[dict]:
    return [
        {
            "code": c.code,
            "name": c.name,
            "description": c.description,
            "max_temp": c.max_temperature,
            "insulation": c.insulation.value,
        }
        for c in default_catalog().list_cable_types()
    ]


def cable_options(cable_type: str) -> dict:
    code = _check_code(cable_type, CABLE_TYPE_PATTERN, "cable type")
    options = default_catalog().cable_options(code)
    return {
        "sizes": list(options["sizes"]),
        "cores": [(c.code, c.name) for c in options["core_configurations"]],
    }


def cores_for_system(system: str, available_cores: List[str]) -> List[Tuple[str, str]]:
    if system is None or not str(system).strip():
        raise Incomplete("system has not been selected")
    cores = [_check_code(c, CORES_PATTERN, "cores") for c in available_cores]
    return selector.cores_for_system(system, cores)


def install_methods_for_cores(cores: str) -> List[Tuple[str, str]]:
    code = _check_code(cores, CORES_PATTERN, "cores")
    return selector.install_methods_for_cores(code)


def default_install_method(cores: str):
    code = _check_code(cores, CORES_PATTERN, "cores")
    return selector.default_install_method(code)


def cable_sizes() -> List[float]:
    return list(default_catalog().all_sizes())


def core_options() -> List[Tuple[str, str]]:
    return [(c.code, c.name) for c in default_catalog().core_configurations()]


def install_methods() -> List[Tuple[str, str]]:
    return [(m.code, m.name) for m in default_catalog().install_methods()]


def build_request(data: Mapping) -> CalculationRequest:
    """Normalises a plain request mapping into a CalculationRequest."""
    if data.get("size") in (None, ""):
        raise Incomplete("size has not been selected")
    if data.get("system") in (None, ""):
        raise Incomplete("system has not been selected")
    return CalculationRequest(
        cable_type=_check_code(data.get("cable_type"), CABLE_TYPE_PATTERN, "cable type"),
        cores=_check_code(data.get("cores"), CORES_PATTERN, "cores"),
        size=parse_size(data["size"]),
        quantity=parse_quantity(data.get("quantity")),
        system=parse_system(data["system"]),
        ground_wire=parse_ground_wire(data.get("ground_wire")),
        install_method=_check_code(data.get("install_method"), METHOD_PATTERN, "installation method"),
    )


def normalize_request(request: CalculationRequest) -> CalculationRequest:
    """Coerces the enum fields of a directly built request ("3Φ" -> System.THREE_PHASE)."""
    if request.system in (None, ""):
        return request
    return replace(
        request,
        system=parse_system(request.system),
        ground_wire=parse_ground_wire(request.ground_wire),
    )


def result_to_dict(result: CalculationResult) -> dict:
    out = result.as_dict()
    out["total_area"] = round(result.total_area, 2)
    out["conductor_area"] = round(result.conductor_area, 2)
    out["allowable_current"] = round(result.allowable_current, 1)
    out["fill_rate"] = round(result.fill_rate, 1)
    return out


def calculate(request: Union[Mapping, CalculationRequest]) -> dict:
    if isinstance(request, CalculationRequest):
        request = normalize_request(request)
    else:
        request = build_request(request)
    return result_to_dict(_calculator.calculate(request))
