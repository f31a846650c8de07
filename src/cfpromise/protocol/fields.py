"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

VALIDATE = "validate_promise"
EVALUATE = "evaluate_promise"
TERMINATE = "terminate"

OPERATION = "operation"
LOG_LEVEL = "log_level"
PROMISER = "promiser"
ATTRIBUTES = "attributes"
ACTION_POLICY = "action_policy"
RESULT = "result"

# Values of the action_policy field on an evaluate request. 'warn' asks
# for a check-only (audit) evaluation; 'fix' is the default.
FIX = "fix"
WARN = "warn"

# Header protocol tag and the flag announcing the JSON variant.
PROTOCOL_VERSION = "v1"
JSON_BASED = "json_based"
