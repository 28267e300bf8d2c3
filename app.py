# app.py
import streamlit as st

from algorithms.kmp import kmp_build_lps, kmp_find_all
from utils.highlight import highlight_matches_html
from utils.text_io import read_files_as_texts

MAX_LISTED = 200

st.set_page_config(page_title="KMP Search", layout="wide")
st.title("KMP substring search")

uploads = st.file_uploader("Upload .txt files (optional)", type=["txt"], accept_multiple_files=True)
texts, names = read_files_as_texts(uploads)

if texts:
    choice = st.selectbox("Document", names)
    text = texts[names.index(choice)]
else:
    text = st.text_area("Text", value="ababcabcabababd", height=200)

pattern = st.text_input("Pattern", value="ababd")

if st.button("Search"):
    lps = kmp_build_lps(pattern)
    hits = kmp_find_all(text, pattern, lps)

    st.metric("Matches", len(hits))
    if hits:
        shown = hits[:MAX_LISTED]
        st.write("Offsets:", shown if len(hits) <= MAX_LISTED else f"{shown} ... (+{len(hits) - MAX_LISTED} more)")

    if pattern:
        st.subheader("Failure function (LPS)")
        st.table({"index": list(range(len(pattern))), "char": list(pattern), "lps": lps})

    st.subheader("Highlighted text")
    st.markdown(highlight_matches_html(text, [(i, len(pattern)) for i in hits]), unsafe_allow_html=True)
