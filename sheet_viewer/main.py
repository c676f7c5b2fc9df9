"""Main Streamlit application entry point"""
import logging
from typing import Callable

import streamlit as st
from streamlit.runtime import get_instance
from streamlit.runtime.scriptrunner import get_script_run_ctx

from sheet_viewer.config import load_config
from sheet_viewer.controller import ViewerController
from sheet_viewer.ui.layout import render_download, render_header
from sheet_viewer.ui.renderer import build_table_view, render_table
from sheet_viewer.ui.status import render_status, startup_failed
from sheet_viewer.util.logs import configure_logging

logger = logging.getLogger(__name__)


def _session_alive_check() -> Callable[[], bool]:
    """Build a predicate that turns False once this browser session is gone."""
    ctx = get_script_run_ctx()
    if ctx is None:
        return lambda: True
    session_id = ctx.session_id
    runtime = get_instance()
    return lambda: runtime.is_active_session(session_id)


def get_controller() -> ViewerController:
    """Get this session's controller, creating and starting it on first use.

    A full page reload starts a new session and therefore a new controller.
    """
    if "controller" not in st.session_state:
        config = load_config()
        controller = ViewerController(config, is_alive=_session_alive_check())
        st.session_state.controller = controller
        with st.spinner("Connecting to Google Sheets..."):
            controller.start()
    return st.session_state.controller


def render_live(controller: ViewerController):
    """Render status and table from the current display state."""
    snapshot = controller.snapshot()
    render_status(snapshot, controller.config.poll_interval_seconds)

    # Startup errors are fatal and already shown by the status surface
    if startup_failed(snapshot):
        return

    render_table(build_table_view(snapshot.table, snapshot.is_loading, snapshot.error))
    render_download(snapshot)


def render():
    """Main render function."""
    configure_logging()
    try:
        st.set_page_config(page_title="Google Sheets Viewer", layout="wide", page_icon="📊")
    except Exception:
        # set_page_config can only be called once, ignore if already set
        pass

    # Always show the header to prevent a blank screen
    render_header()

    try:
        _render_content()
    except Exception as e:
        # Catch any unhandled errors to prevent blank screen
        logger.exception("Unhandled error while rendering the viewer")
        st.error("⚠️ An error occurred while rendering the viewer")
        with st.expander("Error Details", expanded=True):
            st.exception(e)


def _render_content():
    """Internal render function with actual content."""
    controller = get_controller()

    # The poller updates state in the background; this fragment only re-reads it
    @st.fragment(run_every=controller.config.display_refresh_seconds)
    def live_area():
        render_live(controller)

    live_area()
