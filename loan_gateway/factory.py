"""Wiring for a ready-to-use decision engine"""

from typing import Optional

from loan_gateway.config import Settings, settings
from loan_gateway.domain.collaborators import Clock, CreditScorer, IdentityTransport
from loan_gateway.domain.decisioning import DecisionPolicy, LoanApplicationProcessor
from loan_gateway.infrastructure.clients.identity import HttpIdentityTransport
from loan_gateway.infrastructure.gateways.identity import IdentityVerifierServiceGateway
from loan_gateway.infrastructure.observability.logging import setup_logging


def create_identity_gateway(
    config: Settings = settings,
    transport: Optional[IdentityTransport] = None,
    clock: Optional[Clock] = None,
) -> IdentityVerifierServiceGateway:
    """Provide identity gateway, defaulting to the HTTP transport"""
    transport = transport or HttpIdentityTransport(
        base_url=config.identity_api_base,
        timeout=config.http_timeout_seconds,
    )
    return IdentityVerifierServiceGateway(transport, clock=clock)


def create_processor(
    credit_scorer: CreditScorer,
    config: Settings = settings,
    transport: Optional[IdentityTransport] = None,
    clock: Optional[Clock] = None,
    configure_logging: bool = True,
) -> LoanApplicationProcessor:
    """Create and configure a LoanApplicationProcessor"""
    if configure_logging:
        setup_logging(config.log_level)

    return LoanApplicationProcessor(
        create_identity_gateway(config, transport=transport, clock=clock),
        credit_scorer,
        policy=DecisionPolicy.from_settings(config),
    )
