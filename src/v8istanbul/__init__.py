"""v8-istanbul - convert V8 block coverage into Istanbul coverage maps."""

__version__ = "0.1.0"
