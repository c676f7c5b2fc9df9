"""Streamlit app entry point - thin wrapper"""
from sheet_viewer.main import render

# Main execution
render()
