import streamlit as st
from views import calendar

# Set page config before anything else is drawn
st.set_page_config(page_title="Seminar Schedule", layout="wide", initial_sidebar_state="collapsed")

st.markdown("""
<style>
    [data-testid="stSidebar"][aria-expanded="true"] > div:first-child {
        width: 300px;
    }
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
    .seminar-entry {
        border-left: 4px solid #ccc;
        padding: 8px 12px;
        margin: 12px 0 4px 0;
    }
    .seminar-entry.past {
        opacity: 0.6;
    }
    .seminar-entry.upcoming {
        border-left-color: #1f77b4;
    }
    .seminar-status {
        font-size: 0.8rem;
        font-weight: bold;
        text-transform: uppercase;
        color: #666;
    }
    .seminar-status.upcoming {
        color: #1f77b4;
    }
    .seminar-meta {
        font-size: 0.9rem;
        color: #555;
    }
    .abstract summary {
        cursor: pointer;
        list-style: none;
    }
    .abstract[open] .dots {
        display: none;
    }
    .abstract .read-more-btn {
        color: #1f77b4;
    }
    .abstract .read-more-btn::after {
        content: " Show more";
    }
    .abstract[open] .read-more-btn::after {
        content: " Show less";
    }
    .empty-sheet {
        opacity: 0.6;
    }
    .seminar-details {
        background-color: #f0f2f6;
        color: #000000;
        border-radius: 10px;
        padding: 20px;
        margin: 20px 0;
        border: 1px solid #ccc;
    }
    .seminar-details h4 {
        color: #1f77b4;
        margin-bottom: 15px;
    }
    .seminar-details .label {
        font-weight: bold;
        color: #2c3e50;
    }
    .seminar-info {
        display: flex;
        flex-wrap: wrap;
        justify-content: space-between;
    }
    .seminar-info div {
        width: 45%;
        margin-bottom: 10px;
    }
</style>
""", unsafe_allow_html=True)

# Sidebar: where the schedule comes from
st.sidebar.title("Workbook")
source = st.sidebar.text_input("Path or URL", value=calendar.config.workbook)
uploaded = st.sidebar.file_uploader("Or upload a workbook", type=["xlsx"])
if st.sidebar.button("Reload"):
    calendar.load_groups.clear()

calendar.show(uploaded.getvalue() if uploaded is not None else source)
