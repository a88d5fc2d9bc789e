import logging
import json
import os
from typing import Optional, Tuple, Union
import openai
from openai import OpenAI
from pydantic import ValidationError
from dotenv import load_dotenv
from app.schemas.audit import AuditRequest, AuditReport, AuditResponse
from app.services.prompt import build_audit_prompt
from app.services.errors import (
    AuditError,
    ConfigurationError,
    InvalidRequestError,
    UpstreamError,
    EmptyResultError,
    UnknownError,
)

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"), format="%(asctime)s - [%(levelname)s] - %(message)s")
logger = logging.getLogger(__name__)

LLM_MODEL = "gpt-4" # gpt-4 over gpt-3.5-turbo for code analysis accuracy
LLM_TEMPERATURE = 0.2 # low temperature, audits should be repeatable
LLM_MAX_TOKENS = 3000 # room for a multi-section report

INVALID_JSON_MESSAGE = "Bad Request: Invalid JSON format in request body."
INVALID_CONTRACT_MESSAGE = "Bad Request: Missing or invalid contractCode in request body."


def get_openai_client(api_key: Optional[str] = None) -> Optional[OpenAI]:
    """
    builds the process wide OpenAI client from OPENAI_API_KEY.
    Returns None when the key is not set, audits then fail with a configuration error.
    """
    load_dotenv()
    api_key = api_key or os.getenv("OPENAI_API_KEY")
    if not api_key:
        logger.critical("OpenAI API key not configured")
        return None
    return OpenAI(api_key=api_key, max_retries=0) #no retries, one call per request


class ContractAuditor:
    def __init__(self, client: Optional[OpenAI] = None):
        self.client = client

    @classmethod
    def from_env(cls) -> "ContractAuditor":
        return cls(client=get_openai_client())

    def parse_request(self, raw_body: Union[bytes, str]) -> AuditRequest:
        try:
            payload = json.loads(raw_body)
        except ValueError as e: #JSONDecodeError & UnicodeDecodeError
            logger.error(f'Request body is not valid JSON: {e}')
            raise InvalidRequestError(INVALID_JSON_MESSAGE)

        try:
            return AuditRequest.model_validate(payload)
        except ValidationError as ve:
            logger.error(f'Request validation failed: {ve}')
            raise InvalidRequestError(INVALID_CONTRACT_MESSAGE)

    def request_audit(self, prompt: str) -> str:
        """
        single chat completion call, returns the raw text of the first choice.
        """
        try:
            logger.info("Sending contract to LLM")
            response = self.client.chat.completions.create(
                model=LLM_MODEL,
                messages=[{"role": "user", "content": prompt}],
                temperature=LLM_TEMPERATURE,
                max_tokens=LLM_MAX_TOKENS,
            )
            logger.info("Received response from LLM")
        except openai.APIError as e:
            status = getattr(e, "status_code", None)
            raise UpstreamError(status, type(e).__name__, e.message)

        content = None
        if response.choices:
            content = response.choices[0].message.content

        if not content or not content.strip():
            logger.error("LLM response content is empty.")
            raise EmptyResultError()

        return content

    def audit(self, raw_body: Union[bytes, str]) -> AuditReport:
        if self.client is None:
            raise ConfigurationError()

        request = self.parse_request(raw_body)
        prompt = build_audit_prompt(request.contractCode)
        content = self.request_audit(prompt)

        # static analysis output (slither/hardhat) would be added to the report here
        return AuditReport(aiAudit=content.strip())

    def handle(self, raw_body: Union[bytes, str]) -> Tuple[int, AuditResponse]:
        """
        **Request boundary**

        -every failure is converted to the {success: false, error} envelope
        -returns (http status, response)
        """
        try:
            report = self.audit(raw_body)
            return 200, AuditResponse.ok(report)

        except AuditError as e:
            logger.error(f'Audit failed: {e.message}')
            return e.status_code, AuditResponse.fail(e.message)

        except Exception as e:
            logger.exception("Error in /api/audit")
            error = UnknownError(e)
            return error.status_code, AuditResponse.fail(error.message)


if __name__=="__main__":
     #Smoke test
    auditor = ContractAuditor.from_env()

    contract = """
pragma solidity ^0.8.0;

contract Vault {
    mapping(address => uint256) public balances;

    function deposit() external payable {
        balances[msg.sender] += msg.value;
    }

    function withdraw() external {
        (bool ok, ) = msg.sender.call{value: balances[msg.sender]}("");
        require(ok);
        balances[msg.sender] = 0;
    }
}
"""
    status, result = auditor.handle(json.dumps({"contractCode": contract}))

    print("\n" + "="*50)
    print(f"Contract Audit Report (HTTP {status})")
    print("="*50)
    print(json.dumps(result.to_body(), indent=4))
    print("="*50+"\n")
