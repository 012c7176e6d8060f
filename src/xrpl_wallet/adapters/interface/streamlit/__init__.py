"""Streamlit presentation adapter."""
