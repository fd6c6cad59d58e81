"""Streamlit surfaces for the lead report."""
