from receipt_processor.schemas.receipt import (  # noqa: F401
    Item,
    PointsResponse,
    ProcessResponse,
    Receipt,
)
