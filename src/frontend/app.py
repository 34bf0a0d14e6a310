"""Kaathu - Medication Tracker Frontend."""

import asyncio
import json
import os
import sys

import streamlit as st

sys.path.append(os.path.join(os.path.dirname(__file__), "..", ".."))

from src.constants import VERSION
from src.frontend.helpers import (
    format_finding_header,
    format_medication_details,
    open_stores,
    run_interaction_check,
)
from src.interactions.models import InteractionFinding
from src.interactions.orchestrator import InvalidInputError
from src.medications.qr_payload import build_qr_payload
from src.utils.logging import logger, set_log_level

set_log_level("DEBUG")


def load_css():
    """Load custom CSS styles from external file."""
    css_file = os.path.join(os.path.dirname(__file__), "styles.css")

    try:
        with open(css_file) as f:
            css_content = f.read()
        st.markdown(f"<style>{css_content}</style>", unsafe_allow_html=True)
    except FileNotFoundError:
        st.warning("CSS file not found. Using default styling.")


def initialize_session_state():
    """Initialize session state variables."""
    if "interaction_results" not in st.session_state:
        st.session_state.interaction_results = None
    if "is_checking" not in st.session_state:
        st.session_state.is_checking = False
    if "error_message" not in st.session_state:
        st.session_state.error_message = None


# Page configuration
st.set_page_config(
    page_title="Kaathu – Medication Tracker",
    page_icon="💊",
    layout="centered",
    initial_sidebar_state="collapsed",
)

load_css()
initialize_session_state()

medication_store, interaction_cache = open_stores()


def render_header():
    """Render the application header."""
    st.markdown('<h1 class="main-header">💊 Kaathu</h1>', unsafe_allow_html=True)
    st.markdown(
        '<p class="sub-header">Your medications, ready for emergency responders</p>',
        unsafe_allow_html=True,
    )
    st.caption(
        "⚠️ Medical Disclaimer: For information only - not a substitute for medical advice."
    )


def render_medication_form():
    """Render the manual entry form."""
    st.markdown("### ➕ Add a medication")

    with st.form("add_medication", clear_on_submit=True):
        name = st.text_input("Name", placeholder="e.g., Metformin")
        dosage = st.text_input("Dosage", placeholder="e.g., 500 mg")
        instructions = st.text_input(
            "Instructions", placeholder="e.g., Once daily in the morning"
        )
        submitted = st.form_submit_button(
            "Add Medication",
            use_container_width=True,
            disabled=st.session_state.is_checking,
        )

    if submitted:
        try:
            medication_store.add(name.strip(), dosage.strip(), instructions.strip())
            st.session_state.interaction_results = None
            st.rerun()
        except InvalidInputError as e:
            st.warning(f"⚠️ {e}")


def render_medication_list():
    """Render the saved medications with remove buttons."""
    st.markdown("### 📋 My medications")

    if not medication_store.medications:
        st.info("No medications saved yet.")
        return

    for med in medication_store.medications:
        info_col, remove_col = st.columns([6, 1])
        with info_col:
            st.markdown(format_medication_details(med))
        with remove_col:
            if st.button(
                "🗑️",
                key=f"remove_{med.id}",
                help="Remove this medication",
                disabled=st.session_state.is_checking,
            ):
                medication_store.remove(med.id)
                st.session_state.interaction_results = None
                st.rerun()


async def check_interactions(medications: list[str]) -> list[InteractionFinding] | None:
    """Run the interaction check, recording any error for display."""
    findings, error_message = await run_interaction_check(medications, interaction_cache)
    if error_message:
        st.session_state.error_message = error_message
    return findings


def render_interaction_results(findings: list[InteractionFinding]):
    """Render interaction findings."""
    if not findings:
        st.success("✅ No interactions found in the search results.")
        return

    for finding in findings:
        st.markdown(format_finding_header(finding), unsafe_allow_html=True)
        st.markdown(finding.description)


def render_qr_payload():
    """Render the emergency payload that the QR code encodes."""
    with st.expander("🆘 Emergency QR data", expanded=False):
        payload = build_qr_payload(medication_store.medications)
        st.code(json.dumps(payload, indent=2), language="json")


def render_qr_import():
    """Render the form that restores medications from scanned QR text."""
    with st.expander("📷 Import from QR data", expanded=False):
        with st.form("import_qr", clear_on_submit=True):
            raw = st.text_area("Scanned QR text", placeholder='{"type": "kaathu", ...}')
            submitted = st.form_submit_button(
                "Import", disabled=st.session_state.is_checking
            )

        if submitted:
            try:
                added = medication_store.import_qr(raw)
            except InvalidInputError as e:
                st.warning(f"⚠️ {e}")
                return
            st.session_state.interaction_results = None
            logger.info(f"Imported {added} medications from QR data")
            st.rerun()


def render_footer():
    """Render application footer."""
    st.markdown("---")

    st.markdown(
        f"""
    <div class="footer-content">
        <p class="footer-disclaimer">
            ⚠️ Always consult your healthcare provider for medical decisions.
        </p>
        <p class="footer-version">
            v{VERSION}
         </p>
    </div>
    """,
        unsafe_allow_html=True,
    )


def main():
    """Streamlit application."""
    render_header()

    if st.session_state.error_message:
        st.error(st.session_state.error_message)

    render_medication_form()
    render_medication_list()

    check_button = st.button(
        "🔬 Check Drug Interactions",
        type="primary",
        use_container_width=True,
        disabled=st.session_state.is_checking,
    )

    if check_button:
        st.session_state.error_message = None

        if len(medication_store.medications) < 2:
            st.warning("⚠️ Please add at least 2 medications to check interactions.")
        else:
            st.session_state.interaction_results = None
            st.session_state.is_checking = True
            st.rerun()

    if st.session_state.is_checking:
        with st.spinner("Searching for interactions..."):
            try:
                st.session_state.interaction_results = asyncio.run(
                    check_interactions(medication_store.names())
                )
            finally:
                st.session_state.is_checking = False
        st.rerun()

    if st.session_state.interaction_results is not None:
        st.markdown("---")
        render_interaction_results(st.session_state.interaction_results)

    render_qr_payload()
    render_qr_import()
    render_footer()


if __name__ == "__main__":
    main()
