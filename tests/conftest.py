from typing import Any

import pytest

from tests.helpers import ARRABIATA


@pytest.fixture
def arrabiata_response() -> dict[str, Any]:
    return {"success": True, "message": "Success", "data": [ARRABIATA]}
