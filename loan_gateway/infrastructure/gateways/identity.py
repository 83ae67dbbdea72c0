"""Identity verification gateway backed by an injected transport and clock"""

import logging
from datetime import datetime
from typing import Optional

from loan_gateway.domain.collaborators import Clock, IdentityTransport, IdentityVerifier
from loan_gateway.domain.exceptions import IdentityServiceError
from loan_gateway.domain.models import IdentityVerificationStatus
from loan_gateway.infrastructure.observability.metrics import (
    identity_check_failures_counter,
    identity_check_latency_histogram,
)
from loan_gateway.utils.date_utils import SystemClock

logger = logging.getLogger(__name__)


class IdentityVerifierServiceGateway(IdentityVerifier):
    """
    Concrete IdentityVerifier.

    The network call goes through `transport` and the check timestamp comes
    from `clock`, so both can be swapped without subclassing.
    """

    def __init__(self, transport: IdentityTransport, clock: Optional[Clock] = None):
        self.transport = transport
        self.clock = clock or SystemClock()
        self.initialized = False
        self.last_check_time: Optional[datetime] = None
        self.last_status = IdentityVerificationStatus.NOT_CHECKED

    def initialize(self) -> None:
        if self.initialized:
            return
        self.initialized = True
        logger.info("Identity verification gateway initialized")

    def validate(self, applicant_name: str, applicant_age: int, applicant_address: str) -> bool:
        status = self.check(applicant_name, applicant_age, applicant_address)
        return status is IdentityVerificationStatus.VERIFIED

    def check(self, applicant_name: str, applicant_age: int, applicant_address: str) -> IdentityVerificationStatus:
        """Run one identity check and record its status and time"""
        try:
            with identity_check_latency_histogram.time():
                verified = self.transport.call_service(applicant_name, applicant_age, applicant_address)
            status = IdentityVerificationStatus.VERIFIED if verified else IdentityVerificationStatus.FAILED

        except IdentityServiceError as e:
            identity_check_failures_counter.inc()
            logger.error(f"Identity service error: {e}", extra={"step": "identity_check"})
            status = IdentityVerificationStatus.FAILED

        self.last_check_time = self.clock.now()
        self.last_status = status
        return status
