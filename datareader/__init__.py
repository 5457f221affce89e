"""
datareader: read records from memory or CSV/JSON/XML files, transform and
validate them one by one, and serialize the result as JSON, XML or CSV.
"""

from datareader.batch import (
    ArrayData,
    CSVReader,
    CSVWriter,
    File,
    JSONReader,
    JSONWriter,
    Reader,
    XMLReader,
    XMLWriter,
)
from datareader.core.exceptions import (
    ConfigurationError,
    DataReaderError,
    OutputError,
    PipelineError,
    ResourceError,
)
from datareader.core.models import DROP, Drop, Keep
from datareader.core.transformers import (
    BaseTransformer,
    CsvHeaderTransformer,
    HeaderSkippingTransformer,
    IdentityTransformer,
    MappingTransformer,
    Transformer,
)

__version__ = "0.1.0"

__all__ = [
    "Reader",
    "ArrayData",
    "File",
    "CSVReader",
    "JSONReader",
    "XMLReader",
    "CSVWriter",
    "JSONWriter",
    "XMLWriter",
    "Transformer",
    "BaseTransformer",
    "IdentityTransformer",
    "HeaderSkippingTransformer",
    "MappingTransformer",
    "CsvHeaderTransformer",
    "Keep",
    "Drop",
    "DROP",
    "DataReaderError",
    "ConfigurationError",
    "ResourceError",
    "OutputError",
    "PipelineError",
]
