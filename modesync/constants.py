APP_NAME = "Scaling Mode Separation Validator"
APP_VERSION = "1.0.0"

DEFAULT_MAPPING_PATH = "quarkus-websocket-service/src/main/resources/scaling-mode-separation.yaml"
DEFAULT_UI_MARKUP_PATH = "quarkus-websocket-service/src/main/resources/META-INF/resources/index.html"
DEFAULT_BACKEND_ROUTER_PATH = "quarkus-websocket-service/src/main/java/com/redhat/healthcare/GeneticPredictorEndpoint.java"
DEFAULT_BROKER_CONFIG_PATH = "quarkus-websocket-service/src/main/resources/application.properties"
DEFAULT_DEPENDENCY_WIRING_PATH = DEFAULT_BACKEND_ROUTER_PATH
DEFAULT_REGRESSION_SUITE_PATH = "scripts/test-ui-regression.js"

MAPPING_PATH_ENV = "MODESYNC_CONFIG"
MAPPING_SECTION = "scaling_modes"

CHECK_ORDER = [
	"ui_markup",
	"backend_router",
	"broker_config",
	"dependency_wiring",
	"regression_suite",
]

CHECK_HEADINGS = {
	"ui_markup": "Validating UI Button Consistency",
	"backend_router": "Validating Backend Mode Mapping",
	"broker_config": "Validating Kafka Configuration",
	"dependency_wiring": "Validating Emitter Channel Injection",
	"regression_suite": "Validating Test Coverage",
}

EXIT_OK = 0
EXIT_VALIDATION_FAILED = 1
EXIT_CONFIG_ERROR = 2

EMITTER_SUFFIX = "Emitter"
PAYLOAD_VARIABLE = "cloudEventJson"
OUTGOING_BINDING_PREFIX = "mp.messaging.outgoing"
TEST_MODE_TABLE = "TEST_MODES"

REMEDIATION_STEPS = (
	"Review the scaling-mode-separation.yaml configuration",
	"Update the corresponding source files to match the configuration",
	"Ensure all UI buttons, backend modes, and Kafka topics are aligned",
	"Run this validation script again to verify fixes",
)
