"""
Typed views over the open ``criteria`` and ``conditions`` maps.

The entities keep the raw maps so storage round-trips stay lossless; these
models give the known shapes a schema and are used to validate input.
"""
from typing import Any, Dict, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from uptime_dashboard.schemas.common import TestType


class CriteriaModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


class UptimeCriteria(CriteriaModel):
    timeout: Optional[float] = Field(default=None, ge=0)
    expected_status: Optional[int] = Field(default=None, ge=100, le=599)


class ResponseTimeCriteria(CriteriaModel):
    max_response_time: Optional[int] = Field(default=None, ge=0)


class CertificateCriteria(CriteriaModel):
    days_before_expiry: Optional[int] = Field(default=None, ge=0)


class GenericCriteria(CriteriaModel):
    pass


CriteriaVariant = Union[
    UptimeCriteria, ResponseTimeCriteria, CertificateCriteria, GenericCriteria
]

CRITERIA_MODELS: Dict[TestType, Type[CriteriaModel]] = {
    TestType.UPTIME: UptimeCriteria,
    TestType.RESPONSE_TIME: ResponseTimeCriteria,
    TestType.CERTIFICATE: CertificateCriteria,
    TestType.SSL: CertificateCriteria,
}


def parse_criteria(test_type: TestType, criteria: Dict[str, Any]) -> CriteriaVariant:
    """Return the criteria variant for ``test_type``; raises ``ValidationError``."""
    model = CRITERIA_MODELS.get(TestType(test_type), GenericCriteria)
    return model.model_validate(criteria or {})


class NotificationConditions(CriteriaModel):
    on_failure: Optional[bool] = None
    on_warning: Optional[bool] = None
