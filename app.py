import setup_ui.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from setup_ui import config
from setup_ui.setup.general_config_page import GeneralConfigPage
from setup_ui.ui.forms import current_form_data, render_errors, render_form
from setup_ui.ui.layout import render_tab_bar, setup_page
from setup_ui.web.view import RenderContext
from setup_ui.web.widgets.tabs import Tabs

logger = logging.getLogger(__name__)

ACTIVE_STEP = "general"
KEY_PREFIX = "su_general"
ACCEPTED_STATE_KEY = "su_accepted_general_config"


def _render_accepted(values) -> None:
    st.success("Configuration accepted.")
    st.json(values)


def main() -> None:
    setup_page()
    st.title("Setup")

    tabs = Tabs.from_config(config.WIZARD_TABS).activate(ACTIVE_STEP)
    render_tab_bar(tabs, RenderContext(base_url=config.BASE_URL))

    page = GeneralConfigPage()
    page.create_elements(current_form_data(KEY_PREFIX))
    form_data = render_form(page, KEY_PREFIX)

    if st.button("Next", type="primary"):
        if page.is_valid(form_data):
            values = page.get_values()
            st.session_state[ACCEPTED_STATE_KEY] = values
            logger.info("Accepted %s with %d value(s)", page.get_name(), len(values))
        else:
            render_errors(page)

    accepted = st.session_state.get(ACCEPTED_STATE_KEY)
    if accepted:
        _render_accepted(accepted)


if __name__ == "__main__":
    main()
