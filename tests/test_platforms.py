import pytest

from artifactkit.errors import UnsupportedPlatform, ValidationError
from artifactkit.models import DEFAULT_PLATFORMS, Platform, PlatformVariant
from artifactkit.platforms import (
    RUST_TARGETS,
    by_platform,
    coerce_platform,
    host_platform,
    rust_target,
    select_variant,
)
from artifactkit.recipe import RecipeSpec


def _per_platform_recipe() -> RecipeSpec:
    return RecipeSpec(
        name="tool",
        version="1",
        variants={
            platform: PlatformVariant(source=f"https://example.invalid/{platform}", script=f"echo {platform}")
            for platform in DEFAULT_PLATFORMS
        },
    )


def test_select_variant_returns_exactly_the_authored_entry() -> None:
    recipe = _per_platform_recipe()
    for platform in DEFAULT_PLATFORMS:
        variant = select_variant(recipe, platform)
        assert variant.script == f"echo {platform}"
        assert variant.source == f"https://example.invalid/{platform}"


def test_select_variant_accepts_platform_strings() -> None:
    recipe = _per_platform_recipe()
    assert select_variant(recipe, "aarch64-darwin").script == "echo aarch64-darwin"


def test_select_variant_rejects_missing_platform(linux_only: RecipeSpec) -> None:
    with pytest.raises(UnsupportedPlatform) as excinfo:
        select_variant(linux_only, Platform.AARCH64_DARWIN)

    error = excinfo.value
    assert error.recipe == "linux-only"
    assert error.platform == "aarch64-darwin"
    assert error.context["supported"] == "aarch64-linux,x86_64-linux"


def test_unknown_platform_string_is_a_validation_error() -> None:
    with pytest.raises(ValidationError):
        coerce_platform("riscv64-linux")


def test_platform_accessors() -> None:
    assert Platform.AARCH64_DARWIN.arch == "aarch64"
    assert Platform.AARCH64_DARWIN.os == "darwin"
    assert Platform.X86_64_LINUX.arch == "x86_64"
    assert Platform.X86_64_LINUX.os == "linux"


def test_host_platform_normalizes_machine_names() -> None:
    assert host_platform(machine="arm64", system="Darwin") is Platform.AARCH64_DARWIN
    assert host_platform(machine="x86_64", system="Linux") is Platform.X86_64_LINUX
    assert host_platform(machine="AMD64", system="linux") is Platform.X86_64_LINUX


def test_host_platform_rejects_unknown_hosts() -> None:
    with pytest.raises(ValidationError):
        host_platform(machine="riscv64", system="Linux")
    with pytest.raises(ValidationError):
        host_platform(machine="x86_64", system="Windows")


def test_rust_targets_cover_every_platform() -> None:
    assert set(RUST_TARGETS) == set(DEFAULT_PLATFORMS)
    assert rust_target("aarch64-darwin") == "aarch64-apple-darwin"
    assert rust_target(Platform.X86_64_LINUX) == "x86_64-unknown-linux-gnu"


def test_by_platform_formats_sources_and_scripts() -> None:
    variants = by_platform(
        tokens={Platform.X86_64_LINUX: "linux-amd64", Platform.AARCH64_DARWIN: "macos-arm64"},
        source="https://example.invalid/tool-{system}.tar.gz",
        script="cp tool-{{system}} bin/",
        scripts={Platform.AARCH64_DARWIN: "cp Tool.app/{{system}} bin/"},
        environments=("TOOL_SYSTEM={{system}}",),
    )

    assert set(variants) == {Platform.X86_64_LINUX, Platform.AARCH64_DARWIN}
    linux = variants[Platform.X86_64_LINUX]
    assert linux.source == "https://example.invalid/tool-linux-amd64.tar.gz"
    assert linux.script == "cp tool-linux-amd64 bin/"
    assert linux.environments == ("TOOL_SYSTEM=linux-amd64",)
    assert variants[Platform.AARCH64_DARWIN].script == "cp Tool.app/macos-arm64 bin/"
