audit_prompt = """
Act as an expert Solidity smart contract security auditor.
Analyze the following Solidity code for vulnerabilities, security risks, and deviations from best practices. Your analysis should be thorough.

Identify specific issues including, but not limited to:
- Reentrancy (Checks, Effects, Interactions pattern)
- Integer Overflow/Underflow (using SafeMath or Solidity >=0.8.0)
- Access Control Issues (modifier usage, ownership, authorization logic)
- Gas Limit Issues / Denial of Service (DoS) vectors (unbounded loops, gas griefing)
- Timestamp Dependence / Block Variable Reliance (block.timestamp, block.number)
- Unchecked External Calls / Return Values (call, delegatecall, staticcall)
- Front-Running Vulnerabilities (e.g., in token approvals, order books)
- Oracle Manipulation risks
- Improper Handling or Locking of Ether/Tokens
- Use of deprecated Solidity features or unsafe practices (e.g., tx.origin)
- Logic errors leading to unintended state changes or behavior
- Precision issues with fixed-point numbers or division
- Delegatecall vulnerabilities

For each issue found:
1.  **Vulnerability/Risk:** Clearly describe the issue.
2.  **Location:** Reference the specific function name(s) and approximate line number(s) if possible.
3.  **Impact:** Explain the potential negative consequences.
4.  **Recommendation:** Suggest a concrete mitigation strategy or code fix.
5.  **Severity:** Assign a severity level (e.g., Critical, High, Medium, Low, Informational).

Structure your response clearly. If no significant issues are found, state that clearly, but still mention any minor best practice recommendations or areas for gas optimization if applicable.

Solidity Code to Audit:
```solidity
{contract_code}
```

Audit Report:
"""


def build_audit_prompt(contract_code: str) -> str:
    # str.replace, not .format: contract source is full of braces
    return audit_prompt.replace("{contract_code}", contract_code)
