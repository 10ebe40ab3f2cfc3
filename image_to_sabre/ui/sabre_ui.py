import os

import requests
import streamlit as st

from image_to_sabre.converter.utils import bytes_to_data_url
from image_to_sabre.ui.client import call_api

DEFAULT_API_URL = os.getenv("API_URL", "http://localhost:8000/")

st.set_page_config(page_title="Screenshot → Sabre", page_icon="✈️", layout="centered")
st.title("✈️ Flight screenshot → Sabre air segments")

# ----- state -----
if "api_url" not in st.session_state:
    st.session_state.api_url = DEFAULT_API_URL
if "history" not in st.session_state:
    st.session_state.history = []  # [(file name, sabre text)]

# ----- sidebar -----
with st.sidebar:
    st.header("Settings")
    st.session_state.api_url = st.text_input("API URL", value=st.session_state.api_url, help="e.g. http://localhost:8000/")
    if st.button("🔄 Clear history"):
        st.session_state.history = []
        st.success("History cleared.")

# ----- upload -----
upload = st.file_uploader("Booking screenshot", type=["png", "jpg", "jpeg", "webp"])
if upload is not None:
    st.image(upload)

    if st.button("Convert", type="primary"):
        data_url = bytes_to_data_url(upload.getvalue(), upload.type or "image/png")
        try:
            with st.spinner("Reading screenshot…"):
                ok, text = call_api(st.session_state.api_url, data_url)
            if ok:
                st.code(text or "(empty response)", language=None)
                st.session_state.history.append((upload.name, text))
            else:
                st.error(text)
        except requests.RequestException as e:
            st.error(f"API call failed: {e}\nIs uvicorn running?")

# ----- history -----
for name, text in reversed(st.session_state.history):
    with st.expander(name):
        st.code(text, language=None)
