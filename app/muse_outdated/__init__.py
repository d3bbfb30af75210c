"""muse-outdated - cargo-outdated analyzer for Muse.

Reports out-of-date Cargo dependencies as Muse findings.
"""

__version__ = "0.1.0"

# Analyzer protocol version reported by the `version` command
ANALYZER_API_VERSION = 1
