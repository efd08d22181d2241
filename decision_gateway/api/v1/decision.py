"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from decision_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from decision_gateway.api.dependencies import get_decision_engine, get_request_id
from decision_gateway.domain.engine import DecisionEngine
from decision_gateway.domain.exceptions import MalformedPersonalCodeError, NoValidLoanError
from decision_gateway.infrastructure.observability.metrics import record_decision, record_period_extension
from decision_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()


@router.post("/loan/decision", response_model=DecisionResponse)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Calculate the approved loan amount and period for an applicant.

    Outcomes:
    - 200: approved amount and period (period may be longer than requested)
    - 400: invalid personal code, amount or period
    - 404: no valid loan (age restriction, debt segment, no period in bounds)
    - 500: unexpected error
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = engine.evaluate(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )

    except NoValidLoanError as e:
        record_decision("rejected")
        log_decision(request_id, "rejected", None, None, (time.time() - start_time) * 1000)
        logging.warning(f"No valid loan: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except MalformedPersonalCodeError as e:
        record_decision("invalid_input")
        log_decision(request_id, "invalid_input", None, None, (time.time() - start_time) * 1000)
        logging.warning(f"Malformed personal code: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        record_decision("error")
        log_decision(request_id, "error", None, None, (time.time() - start_time) * 1000)
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000

    if decision.error_message is not None:
        record_decision("invalid_input")
        log_decision(request_id, "invalid_input", None, None, duration_ms)
        raise HTTPException(status_code=400, detail=decision.error_message)

    record_decision("approved", decision.loan_amount)
    record_period_extension(request_body.loan_period, decision.loan_period)
    log_decision(request_id, "approved", decision.loan_amount, decision.loan_period, duration_ms)

    return DecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
    )
