from standards import facade
from standards.catalog import default_catalog

def test_user_case():
    print("--- Reproducing User Scenario ---")

    # User inputs
    request = {
        "cable_type": "CV",
        "cores": "1C",
        "size": "95",
        "quantity": 1,
        "system": "3Φ",
        "ground_wire": "none",
        "install_method": "B1",
    }

    print(f"Cable: {request['cable_type']} {request['cores']} {request['size']} mm² x{request['quantity']}")
    print(f"System: {request['system']} | Method: {request['install_method']} | Ground: {request['ground_wire']}")

    # Calculate
    res = facade.calculate(request)

    print("\n--- Result ---")
    print(f"Conductor area: {res['conductor_area']} mm²")
    print(f"Total area:     {res['total_area']} mm²")
    print(f"Allowable:      {res['allowable_current']} A")
    print(f"Conduit:        {res['recommended_conduit']} ({res['fill_rate']}%)")
    print(f"Notes:          {res['install_method_desc']}")

    # Highest unconditioned rating for 95mm² XLPE across all methods
    catalog = default_catalog()
    ceiling = max(
        catalog.ampacity("XLPE", m.code, 95, loaded)
        for m in catalog.install_methods()
        for loaded in (2, 3)
    )
    print(f"\n95mm² XLPE ceiling: {ceiling} A")

    assert 0 < res["allowable_current"] < ceiling
    assert res["recommended_conduit"] != "none found"
    assert res["fill_rate"] <= 33.0

if __name__ == "__main__":
    test_user_case()
