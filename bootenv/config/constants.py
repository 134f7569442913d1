# Always forced into the config mapping
BOOT_COLOR = "BOOT_COLOR"
BOOT_COLOR_VALUE = "true"

BOOT_HOME = "BOOT_HOME"
BOOT_DIR_NAME = ".boot"

CLOJURE_NAME = "clojure"

PROPERTIES_FILE = "boot.properties"
SETTINGS_FILE = "bootenv.yaml"
