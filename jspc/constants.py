"""Shared defaults for the page precompilation pipeline."""

DEFAULT_INJECT_STRING = "</web-app>"
DEFAULT_PACKAGE_NAME = "jsp"
DEFAULT_PACKAGING = "war"

DEFAULT_SOURCE_DIRECTORY = "src/main/webapp"
DEFAULT_WORKING_DIRECTORY = "jsp-source"
DEFAULT_WEB_FRAGMENT_FILE = "web-fragment.xml"
DEFAULT_INPUT_WEB_XML = "src/main/webapp/WEB-INF/web.xml"
DEFAULT_OUTPUT_WEB_XML = "jspweb.xml"
DEFAULT_BUILD_DIRECTORY = "target"
DEFAULT_OUTPUT_DIRECTORY = "classes"

DEFAULT_COMPILER = "jasper"
DEFAULT_JSPC_MAIN_CLASS = "org.apache.jasper.JspC"
DEFAULT_MERGE_STRATEGY = "marker"

DEFAULT_XML_ENCODING = "UTF-8"
ENCODING_SCAN_CHARS = 1024

CLASS_FILE_PATTERN = "**/*.class"

ENV_RUNTIME_ROOT = "JAVA_HOME"
ENV_SKIP = "JSPC_SKIP"
