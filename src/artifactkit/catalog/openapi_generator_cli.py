from __future__ import annotations

import textwrap

from artifactkit.catalog import openjdk
from artifactkit.models import Platform
from artifactkit.platforms import by_platform
from artifactkit.recipe import RecipeSpec, Slot

NAME = "openapi-generator-cli"
VERSION = "7.18.0"

# JAVA_HOME suffix inside the openjdk output tree.
JAVA_HOMES = {
    Platform.AARCH64_DARWIN: "/Contents/Home",
    Platform.AARCH64_LINUX: "",
    Platform.X86_64_DARWIN: "/Contents/Home",
    Platform.X86_64_LINUX: "",
}

SCRIPT = textwrap.dedent("""\
    mkdir -p "$ARTIFACT_OUTPUT/bin"

    pushd ./source/{{name}}

    cp META-INF/MANIFEST.MF ../MANIFEST.MF

    jar cfm ../openapi-generator-cli.jar ../MANIFEST.MF .

    mv -v ../openapi-generator-cli.jar "$ARTIFACT_OUTPUT/openapi-generator-cli.jar"

    cat << EOF > "$ARTIFACT_OUTPUT/bin/openapi-generator-cli"
    #!/bin/sh
    JAVA_HOME={{openjdk}}{{system}}
    PATH=\\$JAVA_HOME/bin:\\$PATH
    java -jar "$ARTIFACT_OUTPUT/openapi-generator-cli.jar" "\\$@"
    EOF

    chmod +x "$ARTIFACT_OUTPUT/bin/openapi-generator-cli"
""")


def recipe() -> RecipeSpec:
    return RecipeSpec(
        name=NAME,
        version=VERSION,
        variants=by_platform(
            tokens=JAVA_HOMES,
            source=(
                "https://repo1.maven.org/maven2/org/openapitools/openapi-generator-cli/"
                f"{VERSION}/openapi-generator-cli-{VERSION}.jar"
            ),
            script=SCRIPT,
            environments=(
                "JAVA_HOME={{openjdk}}{{system}}",
                "PATH=$JAVA_HOME/bin:$PATH",
            ),
        ),
        slots=(Slot("openjdk", openjdk.recipe()),),
    )
