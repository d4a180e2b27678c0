"""Streamlit dashboard for the room distribution service."""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import requests
import streamlit as st

# ==========================================
# Configuration & Constants
# ==========================================
# Point this to your local FastAPI server
API_BASE_URL = "http://127.0.0.1:8000"

st.set_page_config(
    page_title="Room Distribution",
    page_icon="🛏️",
    layout="wide",
)

# ==========================================
# API Helper Functions
# ==========================================
def fetch_distribution(
    room_count: int,
    adults: int,
    seniors: int,
    children: int,
) -> Optional[Dict[str, Any]]:
    """Calls the backend distribution endpoint."""
    try:
        response = requests.post(
            f"{API_BASE_URL}/distribute",
            json={
                "room_count": room_count,
                "adults": adults,
                "seniors": seniors,
                "children": children,
            },
            timeout=5,
        )
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        st.error(f"Distribution request failed: {e}")
        return None


def rooms_to_frame(rooms: list[Dict[str, int]]) -> pd.DataFrame:
    df = pd.DataFrame(rooms, columns=["adults", "seniors", "children"])
    df["total"] = df[["adults", "seniors", "children"]].sum(axis=1)
    df.index = pd.RangeIndex(start=1, stop=len(df) + 1, name="room")
    return df


# ==========================================
# UI Page Functions
# ==========================================
def render_distribution_page() -> None:
    st.header("🛏️ Room Distribution")
    st.markdown(
        "Assign adults, seniors and children to rooms. Children never stay "
        "without an adult or senior and seniors are grouped where possible."
    )

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        room_count = st.number_input("Rooms", min_value=0, max_value=50, value=2)
    with col2:
        adults = st.number_input("Adults", min_value=0, max_value=200, value=2)
    with col3:
        seniors = st.number_input("Seniors", min_value=0, max_value=200, value=2)
    with col4:
        children = st.number_input("Children", min_value=0, max_value=200, value=1)

    if st.button("Distribute", type="primary"):
        with st.spinner("Assigning rooms..."):
            result = fetch_distribution(
                int(room_count), int(adults), int(seniors), int(children)
            )

            if result:
                metric_col1, metric_col2, metric_col3 = st.columns(3)
                metric_col1.metric("Status", result.get("status", "unknown"))
                metric_col2.metric("Rooms Used", len(result.get("rooms", [])))
                metric_col3.metric("Senior-only Rooms", result.get("senior_only_rooms", 0))

                rooms = result.get("rooms", [])
                if rooms:
                    st.write("### Assignment")
                    st.dataframe(rooms_to_frame(rooms), use_container_width=True)
                else:
                    st.error("Impossible: no assignment satisfies the room rules.")


# ==========================================
# Main App Router
# ==========================================
def main() -> None:
    st.sidebar.title("Room Distribution")
    st.sidebar.markdown("---")
    st.sidebar.caption(f"Backend: {API_BASE_URL}")

    render_distribution_page()


if __name__ == "__main__":
    main()
