# app.py
import sqlite3
import streamlit as st

from .wordnet_factory import WordNetFactory
from .wordnet_api import WordNetAPI

_orig_connect = sqlite3.connect


def connect_threadsafe(*args, **kwargs):
    kwargs["check_same_thread"] = False
    return _orig_connect(*args, **kwargs)


def patch_sqlite() -> None:
    """Disable check_same_thread for the `sqlite3` backend of `wn`.

    Streamlit reruns a page on another thread than the one that opened the
    lexicon database.
    """
    sqlite3.connect = connect_threadsafe


@st.cache_resource
def init_wordnet(wn_version) -> WordNetAPI:
    return WordNetFactory.create(wn_version)


def select_wordnet(column) -> WordNetAPI:
    """Version selector; returns the cached WordNetAPI for the chosen version."""
    # Init session_state for WordNet versions
    if 'wordnet_instances' not in st.session_state:
        st.session_state.wordnet_instances = {}
    if 'selected_wn_version' not in st.session_state:
        st.session_state.selected_wn_version = None

    with column:
        wn_version = st.selectbox("WordNet version", WordNetFactory.versions())

        # If version is not in session_state -> init it once
        if wn_version != st.session_state.selected_wn_version:
            st.session_state.selected_wn_version = wn_version
            if wn_version not in st.session_state.wordnet_instances:
                st.session_state.wordnet_instances[wn_version] = init_wordnet(wn_version)

    return st.session_state.wordnet_instances[wn_version]
