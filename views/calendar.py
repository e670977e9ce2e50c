import streamlit as st
import pandas as pd
from st_aggrid import AgGrid, GridOptionsBuilder
import logging

from calendar_export import build_event_calendar
from classifier import classify_events, current_time
from config import get_config
from formatting import abstract_id, format_time_12h, make_sheet_slug
from render import display_date, load_error_message, render_details, render_empty_sheet, render_entry
from workbook import SeminarWorkbook, WorkbookLoadError

# Set up logging
logging.basicConfig(level=logging.INFO)

config = get_config()

TABLE_COLUMNS = ['semester', 'date', 'start_time', 'end_time', 'speaker', 'title', 'location', 'status']


@st.cache_data(ttl=config.cache_ttl_seconds, show_spinner="Loading seminars...")
def load_groups(source):
    return SeminarWorkbook(source).load()


def seminars_frame(groups, classification):
    """Flatten all semesters into one table, keeping workbook order."""
    rows = []
    for group_index, group in enumerate(groups):
        for record_index, record in enumerate(group.records):
            status = classification.status_of(group_index, record_index)
            rows.append({
                'group': group_index,
                'record': record_index,
                'semester': group.name,
                'date': display_date(record),
                'start_time': format_time_12h(record.start_time),
                'end_time': format_time_12h(record.end_time),
                'speaker': record.speaker,
                'title': record.title,
                'location': record.location,
                'status': status.label if status else '',
            })
    return pd.DataFrame(rows, columns=['group', 'record'] + TABLE_COLUMNS)


def display_seminar_entry(group, group_index, record, index, status):
    element_id = abstract_id(group.name, index)
    st.markdown(render_entry(record, status, element_id), unsafe_allow_html=True)

    ics = build_event_calendar(record, make_sheet_slug(group.name), index, config)
    if ics:
        st.download_button(
            "Add to Calendar",
            data=ics,
            file_name=f"{element_id}.ics",
            mime="text/calendar",
            key=f"atc_{group_index}_{index}",
        )


def display_schedule(groups, classification):
    """One expander per semester; only the semester with the next seminar starts open."""
    for group_index, group in enumerate(groups):
        expanded = group_index == classification.expanded_group
        with st.expander(group.name, expanded=expanded):
            if not group.records:
                st.markdown(render_empty_sheet(), unsafe_allow_html=True)
                continue
            for index, record in enumerate(group.records):
                status = classification.status_of(group_index, index)
                display_seminar_entry(group, group_index, record, index, status)


def display_seminars_table(groups, classification):
    """Helper function to display all seminars using AgGrid."""
    df = seminars_frame(groups, classification)
    if df.empty:
        st.warning("No seminars found.")
        return

    gb = GridOptionsBuilder.from_dataframe(df)
    gb.configure_column("group", hide=True)
    gb.configure_column("record", hide=True)
    gb.configure_column("semester", width=60)
    gb.configure_column("date", width=40)
    gb.configure_column("start_time", width=35)
    gb.configure_column("end_time", width=35)
    gb.configure_column("speaker", width=80)
    gb.configure_column("title", width=200, wrapText=True, autoHeight=True)
    gb.configure_column("location", width=60)
    gb.configure_column("status", width=50)
    gb.configure_selection('single', use_checkbox=False)
    grid_options = gb.build()

    grid_response = AgGrid(
        df,
        gridOptions=grid_options,
        height=350,
        data_return_mode='AS_INPUT',
        update_mode='SELECTION_CHANGED',
        fit_columns_on_grid_load=True,
    )

    selected_rows = pd.DataFrame(grid_response['selected_rows'])
    if not selected_rows.empty and 'group' in selected_rows.columns:
        group_index = int(selected_rows.iloc[0]['group'])
        record_index = int(selected_rows.iloc[0]['record'])
        group = groups[group_index]
        record = group.records[record_index]
        status = classification.status_of(group_index, record_index)
        logging.info(f"Seminar selected: {record.title}")
        st.markdown(render_details(record, group.name, status), unsafe_allow_html=True)


def show(source=None):
    st.title("Seminar Calendar")
    workbook = SeminarWorkbook(source or config.workbook)

    try:
        groups = load_groups(workbook.source)
    except WorkbookLoadError as e:
        logging.exception(f"Failed to load {workbook.label}")
        st.error(load_error_message(workbook.label, e))
        return

    if not groups:
        st.warning("No semesters found in the workbook.")
        return

    classification = classify_events(groups, current_time(config.timezone))

    tab1, tab2 = st.tabs(["Schedule", "All Seminars"])

    with tab1:
        display_schedule(groups, classification)

    with tab2:
        display_seminars_table(groups, classification)
