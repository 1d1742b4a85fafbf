from pathlib import Path

# Optional config file picked up from the working directory (overrideable via --config)
CONFIG_FILE = Path("st.yaml")
