"""
Typed Exception Hierarchy for the Inventory Kernel.

Every error has a typed class, a machine-readable ``code`` class attribute,
and carries its context as attributes rather than inside the message.

    InventoryKernelError (base)
    |
    +-- ItemError
    |   +-- ItemNotFoundError
    |   +-- InvalidItemError
    |
    +-- ScanError
    |   +-- InvalidScanPayloadError
    |
    +-- ConfigError
    |   +-- ConfigValidationError
    |
    +-- ExportError
        +-- UnsupportedExportFormatError

Category   | Code                       | When Raised
-----------|----------------------------|------------------------------------------
Item       | ITEM_NOT_FOUND             | Item ID not present in the store
           | INVALID_ITEM               | Negative quantity/cost, missing id/name
-----------|----------------------------|------------------------------------------
Scan       | INVALID_SCAN_PAYLOAD       | Typed scan payload built with bad fields
-----------|----------------------------|------------------------------------------
Config     | CONFIG_VALIDATION_FAILED   | Threshold out of range, missing section
-----------|----------------------------|------------------------------------------
Export     | UNSUPPORTED_EXPORT_FORMAT  | Export format other than csv/xlsx

The QR decoder never raises for bad scanner input; it returns a
``ScanRejected`` value carrying the same codes.
"""


class InventoryKernelError(Exception):
    """
    Base exception for all inventory kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "INVENTORY_KERNEL_ERROR"


# Item-related exceptions


class ItemError(InventoryKernelError):
    """Base exception for inventory item errors."""

    code: str = "ITEM_ERROR"


class ItemNotFoundError(ItemError):
    """Item ID does not exist in the inventory."""

    code: str = "ITEM_NOT_FOUND"

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Inventory item not found: {item_id}")


class InvalidItemError(ItemError):
    """Item fields violate the record contract."""

    code: str = "INVALID_ITEM"

    def __init__(self, item_id: str | None, field: str, value: object, reason: str):
        self.item_id = item_id
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid item {item_id!r}: {field}={value!r} ({reason})")


# Scan-related exceptions


class ScanError(InventoryKernelError):
    """Base exception for QR scan payload errors."""

    code: str = "SCAN_ERROR"


class InvalidScanPayloadError(ScanError):
    """Scan payload field has the wrong type or value."""

    code: str = "INVALID_SCAN_PAYLOAD"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid scan payload field '{field}': {reason}")


# Configuration exceptions


class ConfigError(InventoryKernelError):
    """Base exception for configuration errors."""

    code: str = "CONFIG_ERROR"


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    code: str = "CONFIG_VALIDATION_FAILED"

    def __init__(self, section: str, key: str, reason: str):
        self.section = section
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration {section}.{key}: {reason}")


# Export exceptions


class ExportError(InventoryKernelError):
    """Base exception for report export errors."""

    code: str = "EXPORT_ERROR"


class UnsupportedExportFormatError(ExportError):
    """Requested export format is not supported."""

    code: str = "UNSUPPORTED_EXPORT_FORMAT"

    def __init__(self, fmt: str, supported: tuple[str, ...]):
        self.fmt = fmt
        self.supported = supported
        super().__init__(
            f"Unsupported export format {fmt!r}; expected one of {', '.join(supported)}"
        )
