class ConverterError(Exception):
    """Base class for every error the converter reports back to the user"""


class ParseError(ConverterError):
    def __init__(self, line=""):
        super().__init__("Parse error")
        self.line = line


class NegativeMagnitudeError(ConverterError):
    """A length or weight below zero"""

    def __init__(self, family, value):
        super().__init__(f"{family.quantity_name} shouldn't be negative.")
        self.family = family
        self.value = value


class ImpossibleConversionError(ConverterError):
    """Units are unknown or belong to different families"""

    def __init__(self, source_label, destination_label):
        super().__init__(f"Conversion from {source_label} to {destination_label} is impossible")
        self.source_label = source_label
        self.destination_label = destination_label


class CatalogError(Exception):
    """The static unit tables break one of their own rules"""
