import sys
import datetime
import logging
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from core.errors import SizingError
from standards import facade
from standards.catalog import default_catalog
from standards.kec_tables import MAX_FILL_RATIO, SIZES_EXTENDED

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

def choose(prompt, options, default=None):
    """Prints numbered (code, label) options and returns the chosen code."""
    for i, (code, label) in enumerate(options, start=1):
        print(f"  ({i}) {label}")
    while True:
        hint = f" [{default}]" if default else ""
        answer = input(f"{prompt}{hint}: ").strip()
        if not answer and default:
            return default
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1][0]
        codes = [code for code, _ in options]
        if answer in codes:
            return answer
        print("Opción inválida, intente de nuevo.")

def get_selection():
    print("\n--- Selección de Cable ---")
    types = facade.list_cable_types()
    cable_type = choose("Tipo de cable", [(t["code"], t["name"]) for t in types])
    options = facade.cable_options(cable_type)

    print("\nSistema: (1) 1Φ monofásico, (2) 3Φ trifásico")
    system = "1Φ" if input("Seleccione sistema [2]: ").strip() == "1" else "3Φ"

    cores_choices = facade.cores_for_system(system, [c for c, _ in options["cores"]])
    if not cores_choices:
        print("Ninguna configuración de núcleos aplica a este sistema. Cambie el cable o el sistema.")
        return None
    cores = choose("Núcleos", cores_choices)

    sizes = [(s, f"{s:g} mm²") for s in options["sizes"]]
    size = choose("Calibre", sizes)

    methods = facade.install_methods_for_cores(cores)
    if not methods:
        print("No hay método de instalación para estos núcleos.")
        return None
    install_method = choose("Método de instalación", methods, facade.default_install_method(cores))

    try:
        quantity = int(input("Cantidad de cables [1]: ") or 1)
    except ValueError:
        quantity = 1

    print("Conductor de tierra: (1) Ninguno, (2) Mismo calibre, (3) Reducido (HFIX)")
    g_choice = input("Opción [1]: ").strip()
    ground_wire = {"2": "same", "3": "reduced"}.get(g_choice, "none")

    return {
        "cable_type": cable_type,
        "cores": cores,
        "size": size,
        "quantity": quantity,
        "system": system,
        "ground_wire": ground_wire,
        "install_method": install_method,
    }

def export_to_excel(rows):
    wb = Workbook()

    # --- Sheet 1: Results ---
    ws1 = wb.active
    ws1.title = "Resultados"

    headers = ["Cable", "Núcleos", "mm²", "Cant.", "Sistema", "Tierra", "Método",
               "Área Cond. (mm²)", "Área Total (mm²)", "Ampacidad (A)", "Ducto", "% Ocupación", "Notas"]
    ws1.append(headers)

    header_fill = PatternFill(start_color="DDDDDD", end_color="DDDDDD", fill_type="solid")
    header_font = Font(bold=True)
    for cell in ws1[1]:
        cell.font = header_font
        cell.fill = header_fill

    for item in rows:
        req = item["request"]
        res = item["result"]
        ws1.append([
            req["cable_type"], req["cores"], req["size"], req["quantity"], req["system"],
            req["ground_wire"], req["install_method"],
            res["conductor_area"], res["total_area"], res["allowable_current"],
            res["recommended_conduit"], f"{res['fill_rate']:.1f}%", res["install_method_desc"]
        ])

    for col in ws1.columns:
        ws1.column_dimensions[col[0].column_letter].width = 15

    # --- Sheet 2: Ampacity reference ---
    catalog = default_catalog()
    ws2 = wb.create_sheet("Ref KEC XLPE")
    ws2.append(["KEC / IEC 60364-5-52 XLPE 90°C (3 conductores cargados)"])
    ws2.append(["Fecha:", datetime.datetime.now().strftime("%Y-%m-%d %H:%M")])
    ws2.append([])
    methods = [m.code for m in catalog.install_methods()]
    ws2.append(["mm²"] + methods)
    for size in SIZES_EXTENDED:
        ws2.append([size] + [catalog.ampacity("XLPE", m, size, 3) for m in methods])

    # --- Sheet 3: Conduits ---
    ws3 = wb.create_sheet("Ref Ductos")
    ws3.append(["Ducto", "Área interior (mm²)", f"{MAX_FILL_RATIO:.0%} (mm²)"])
    for name, area in catalog.conduit_area_table():
        ws3.append([name, round(area, 1), round(area * MAX_FILL_RATIO, 1)])

    filename = f"Memoria_KEC_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    wb.save(filename)
    print(f"\n[INFO] Excel generado: {filename}")

def main():
    print("==========================================================")
    print(" DIMENSIONAMIENTO DE CABLE Y DUCTO (KEC)")
    print("==========================================================")

    rows = []
    while True:
        request = get_selection()
        if request:
            try:
                result = facade.calculate(request)
            except SizingError as e:
                print(f"Error de cálculo: {e}")
            else:
                rows.append({"request": request, "result": result})
                print("-" * 80)
                print(f"Área conductor: {result['conductor_area']:.2f} mm² | Área total: {result['total_area']:.2f} mm²")
                print(f"Ampacidad:      {result['allowable_current']:.1f} A")
                print(f"Ducto:          {result['recommended_conduit']} ({result['fill_rate']:.1f}%)")
                print(f"Notas:          {result['install_method_desc']}")
                print("-" * 80)

        more = input("¿Calcular otro cable? (s/n): ").lower()
        if more != 's':
            break

    if not rows:
        print("No se calcularon cables.")
        sys.exit()

    ask = input("\n¿Exportar reporte a Excel? (s/n): ").lower()
    if ask == 's':
        export_to_excel(rows)

if __name__ == "__main__":
    main()
