"""Built-in scene formats. Importing this package registers them."""

from dlascene.export.formats import csv, javascript, povray

__all__ = ["csv", "javascript", "povray"]
