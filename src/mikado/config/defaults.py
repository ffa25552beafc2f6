"""
mikado.config.defaults - Default configuration values
"""

CONFIG_FILE_NAME = ".mikado.toml"

DEFAULT_CONFIG = {
    "output": {
        # Pipe DOT through the renderer (false prints DOT to stdout)
        "render": True,
        "format": "png",
        "rankdir": "RL",
        "renderer": "dot",
    },
    "done": {
        # Mark nodes done when every prerequisite is done
        "auto": False,
        # Leave done nodes and edges into them out of the graph
        "hide": False,
        # Strip done markers without marking anything done
        "ignore": False,
    },
}
