# Lookups in the call ledger
NOT_FOUND_FOR_CALL = "{WHAT} not found for (methodName: {METHOD}, callNumber: {CALL_NUMBER})"
NOT_FOUND_FOR_PARAMETER = (
    "{WHAT} not found for (methodName: {METHOD}, callNumber: {CALL_NUMBER} "
    "and parameterName: {PARAMETER})"
)
NOT_FOUND_FOR_METHOD = "{WHAT} not found for (methodName: {METHOD})"

WHAT_METHOD_NAME = "MethodName"
WHAT_CALL_NUMBER = "CallNumber"
WHAT_PARAMETER_NAME = "ParameterName"

# Value comparison
TYPE_MISMATCH = "expected value type is {EXPECTED} but found {ACTUAL}"
VALUES_NOT_EQUAL = "expected [{EXPECTED}] but found [{ACTUAL}]"
VALUES_NOT_SAME = "expected same instance as [{EXPECTED}] but found [{ACTUAL}]"
TOO_MANY_VALUES = "Too many values to compare for (methodName: {METHOD}, callNumber: {CALL_NUMBER})"
NOT_CALLED_WITH_VALUES = "Method: {METHOD} not called with values: [{VALUES}]"

# Return value dispenser
NO_RETURN_VALUE = "No return value found for methodName: {METHOD} and parameterValues: {VALUES}"
NO_DISPENSER = (
    "Method record_call_and_resolve can not be used before a dispenser has been set "
    "using the method use_dispenser"
)

# Argument pairs
ODD_NUMBER_OF_PAIRS = (
    "Arguments for {METHOD} must be given as name, value pairs but {COUNT} items were given"
)
NAME_NOT_A_STRING = "Argument name at position {POSITION} for {METHOD} must be a str, got {TYPE}"
