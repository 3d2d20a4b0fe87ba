"""Run the report generator with ``python -m spark_report``."""
import sys

from .generate_report import main

sys.exit(main())
