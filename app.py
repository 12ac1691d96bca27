"""SolarQuote — Streamlit entry point.

    uv run streamlit run app.py
"""

from solarquote.app import main

main()
