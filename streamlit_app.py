"""Entry point for `streamlit run streamlit_app.py` and hosted deployments."""

from app.app import main

main()
