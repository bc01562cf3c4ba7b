"""Streamlit UI for Oripro Dashboard."""
