import io
import logging
import streamlit as st
import pandas as pd
from core.errors import SizingError
from standards import facade
from standards.kec_tables import AMBIENT_BASELINE_C, MAX_FILL_RATIO, NONE_FOUND

logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# --- Page Config ---
st.set_page_config(
    page_title="Dimensionamiento de Cable y Ducto (KEC)",
    page_icon="⚡",
    layout="wide",
    initial_sidebar_state="expanded"
)

# --- Custom CSS ---
st.markdown("""
<style>
    .reportview-container { background: #f0f2f6; }
    .main-header { font-family: 'Inter', sans-serif; color: #1E3A8A; font-weight: 700; }
    .stDataFrame { border-radius: 10px; overflow: hidden; }
</style>
""", unsafe_allow_html=True)

# Bandas de ocupación para la barra del ducto
FILL_WARNING_LIMIT = 50.0
FILL_STATUS_LABELS = {"safe": "seguro", "warning": "advertencia", "danger": "peligro"}

if "last_result" not in st.session_state:
    st.session_state.last_result = None

def fill_status(fill_rate: float) -> str:
    if fill_rate <= MAX_FILL_RATIO * 100:
        return "safe"
    if fill_rate <= FILL_WARNING_LIMIT:
        return "warning"
    return "danger"

# --- Helper: Exportar Excel ---
def to_excel(request: dict, result: dict) -> bytes:
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        rows = [{"Parámetro": k, "Valor": v} for k, v in request.items()]
        rows += [{"Parámetro": k, "Valor": v} for k, v in result.items()]
        pd.DataFrame(rows).to_excel(writer, index=False, sheet_name='Resultado')

        methods = pd.DataFrame(facade.install_methods(), columns=["Código", "Método"])
        methods.to_excel(writer, index=False, sheet_name='Métodos de Instalación')
    return output.getvalue()

# --- Sidebar: selección en orden de dependencia ---
with st.sidebar:
    st.title("Selección")

    cable_types = facade.list_cable_types()
    type_labels = {t["code"]: t["name"] for t in cable_types}
    cable_code = st.selectbox("Tipo de cable", list(type_labels), format_func=lambda c: type_labels[c])
    selected_type = next(t for t in cable_types if t["code"] == cable_code)
    st.caption(f"{selected_type['description']} (máx {selected_type['max_temp']}°C)")

    options = facade.cable_options(cable_code)
    system = st.radio("Sistema", ["1Φ", "3Φ"], index=1, horizontal=True)

    cores_choices = facade.cores_for_system(system, [c for c, _ in options["cores"]])
    if not cores_choices:
        st.warning("Ninguna configuración de núcleos aplica a este sistema. Cambie el cable o el sistema.")
        st.stop()
    core_labels = dict(cores_choices)
    cores = st.selectbox("Núcleos", list(core_labels), format_func=lambda c: core_labels[c])

    size = st.selectbox("Calibre (mm²)", options["sizes"], format_func=lambda s: f"{s:g} mm²")

    methods = facade.install_methods_for_cores(cores)
    if not methods:
        st.warning("No hay método de instalación para estos núcleos. Cambie la selección.")
        st.stop()
    method_labels = dict(methods)
    default_method = facade.default_install_method(cores)
    method_codes = list(method_labels)
    install_method = st.selectbox(
        "Método de instalación", method_codes,
        index=method_codes.index(default_method) if default_method in method_codes else 0,
        format_func=lambda m: method_labels[m]
    )

    quantity = st.number_input("Cantidad de cables", 1, 200, 1)
    ground_wire = st.radio("Conductor de tierra", ["none", "same", "reduced"], horizontal=True,
                           format_func=lambda g: {"none": "Ninguno", "same": "Mismo calibre", "reduced": "Reducido (HFIX)"}[g])

# --- Main Area ---
st.markdown("<h1 class='main-header'>⚡ Dimensionamiento de Cable y Ducto (KEC)</h1>", unsafe_allow_html=True)
st.markdown("---")

request = {
    "cable_type": cable_code,
    "cores": cores,
    "size": size,
    "quantity": int(quantity),
    "system": system,
    "ground_wire": ground_wire,
    "install_method": install_method,
}

try:
    st.session_state.last_result = facade.calculate(request)
except SizingError as e:
    # Nunca dejar un resultado viejo en pantalla
    st.session_state.last_result = None
    st.error(f"Error de cálculo: {e}")

result = st.session_state.last_result
if result:
    c1, c2, c3 = st.columns(3)
    c1.metric("Área total", f"{result['total_area']:,.2f} mm²")
    c2.metric("Área conductor", f"{result['conductor_area']:,.2f} mm²")
    c3.metric("Ampacidad", f"{result['allowable_current']:,.1f} A")
    st.caption(result["install_method_desc"])
    st.caption(f"Ambiente base: {AMBIENT_BASELINE_C['air']:g}°C aire / {AMBIENT_BASELINE_C['ground']:g}°C terreno, sin corrección por temperatura.")

    st.markdown("##### Ducto")
    status = fill_status(result["fill_rate"])
    if result["recommended_conduit"] == NONE_FOUND:
        st.error(f"Ningún ducto mantiene la ocupación bajo {MAX_FILL_RATIO:.0%}. "
                 f"El ducto más grande quedaría al {result['fill_rate']:.1f}%.")
    else:
        st.success(f"Recomendado: {result['recommended_conduit']} ({result['fill_rate']:.1f}% ocupación)")
    st.progress(min(result["fill_rate"], 100.0) / 100.0, text=f"Ocupación: {result['fill_rate']:.1f}% ({FILL_STATUS_LABELS[status]})")

    st.download_button(
        "📥 Exportar a Excel",
        data=to_excel(request, result),
        file_name=f"kec_sizing_{cable_code}_{size:g}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
