"""Tests for the component generation orchestrator.

Covers:
- Default generation writes the five documented files
- Multiple components land beside the first one
- notest / withcontainer directories
- Existing folders or containers and shared folders or files abort before any I/O
- A second identical run fails and leaves the first run's files untouched
- Write and mkdir failures are reported per artifact and raised by run()
- Existence checks precede mkdirs, which precede writes
- Index-of-folders mode
"""

from __future__ import annotations

from pathlib import Path

import pytest

from shared_scaffold.errors import (
    DuplicateComponentError,
    FilesystemError,
    LayoutError,
    PathAlreadyExistsError,
)
from shared_scaffold.scaffolder import ComponentGenerator


def _tree(root: Path) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


class TestGenerate:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_default_files(self, config, make_request, components_dir):
        result = await ComponentGenerator(config).run(make_request("src/components/button"))

        assert result.succeeded
        assert _tree(components_dir) == [
            "button/Button.js",
            "button/Render.jsx",
            "button/Render.native.js",
            "button/__tests__/button.test.jsx",
            "button/__tests__/button.test.native.js",
        ]
        assert len(result.written_paths) == 5
        index = (components_dir / "button" / "Button.js").read_text(encoding="utf-8")
        assert "export default injectIntl(Button, { withRef: true })" in index

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_multiple_components_share_parent(self, config, make_request, components_dir):
        result = await ComponentGenerator(config).run(
            make_request("src/components/button", "input", "forms/select")
        )
        assert [c.name for c in result.components] == ["button", "input", "select"]
        assert (components_dir / "input" / "Input.js").is_file()
        assert (components_dir / "select" / "Select.js").is_file()
        assert not (components_dir / "forms").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_no_test_skips_tests_dir(self, config, make_request, components_dir):
        await ComponentGenerator(config).run(make_request("src/components/button", no_test=True))
        assert not (components_dir / "button" / "__tests__").exists()
        assert len(_tree(components_dir)) == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_with_container(self, config, make_request, project_root):
        result = await ComponentGenerator(config).run(
            make_request("src/components/button", with_container=True)
        )
        container = project_root / "src" / "containers" / "ButtonContainer.js"
        assert container.is_file()
        assert len(result.written_paths) == 6
        assert _tree(project_root / "src" / "containers") == ["ButtonContainer.js"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_existing_containers_dir_is_fine(self, config, make_request, project_root):
        (project_root / "src" / "containers").mkdir()
        result = await ComponentGenerator(config).run(
            make_request("src/components/button", with_container=True)
        )
        assert result.succeeded

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_elapsed_recorded(self, config, make_request):
        result = await ComponentGenerator(config).run(make_request("src/components/button"))
        assert result.elapsed_seconds >= 0


class TestRefusals:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_existing_folder(self, config, make_request, components_dir, project_root):
        (components_dir / "button").mkdir()
        with pytest.raises(PathAlreadyExistsError) as exc_info:
            await ComponentGenerator(config).run(
                make_request("src/components/button", with_container=True)
            )
        assert exc_info.value.path == components_dir / "button"
        assert list((components_dir / "button").iterdir()) == []
        assert not (project_root / "src" / "containers").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_any_existing_folder_stops_all(self, config, make_request, components_dir):
        (components_dir / "input").mkdir()
        with pytest.raises(PathAlreadyExistsError):
            await ComponentGenerator(config).run(make_request("src/components/button", "input"))
        assert not (components_dir / "button").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_second_run_fails_and_keeps_files(self, config, make_request, components_dir):
        generator = ComponentGenerator(config)
        await generator.run(make_request("src/components/button"))
        before = {p: p.read_bytes() for p in components_dir.rglob("*") if p.is_file()}

        with pytest.raises(PathAlreadyExistsError):
            await generator.run(make_request("src/components/button"))

        after = {p: p.read_bytes() for p in components_dir.rglob("*") if p.is_file()}
        assert after == before

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_duplicate_names(self, config, make_request, components_dir):
        with pytest.raises(DuplicateComponentError) as exc_info:
            await ComponentGenerator(config).run(
                make_request("src/components/button", "other/button")
            )
        assert exc_info.value.names == ["button", "button"]
        assert not (components_dir / "button").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_names_sharing_a_container(self, config, make_request, components_dir, project_root):
        with pytest.raises(DuplicateComponentError) as exc_info:
            await ComponentGenerator(config).run(
                make_request("src/components/button", "Button", with_container=True)
            )
        assert exc_info.value.path == project_root / "src" / "containers" / "ButtonContainer.js"
        assert exc_info.value.names == ["button", "Button"]
        assert list(components_dir.iterdir()) == []
        assert not (project_root / "src" / "containers").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_existing_container_file(self, config, make_request, components_dir, project_root):
        containers = project_root / "src" / "containers"
        containers.mkdir()
        (containers / "ButtonContainer.js").write_text("keep", encoding="utf-8")

        with pytest.raises(PathAlreadyExistsError) as exc_info:
            await ComponentGenerator(config).run(
                make_request("src/components/button", with_container=True)
            )
        assert exc_info.value.path == containers / "ButtonContainer.js"
        assert not (components_dir / "button").exists()
        assert (containers / "ButtonContainer.js").read_text(encoding="utf-8") == "keep"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_layout_error_before_io(self, config, make_request, project_root):
        with pytest.raises(LayoutError):
            await ComponentGenerator(config).run(make_request("lib/button", with_container=True))
        assert not (project_root / "lib").exists()


class TestFailures:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_write_failure_reported(self, config, make_request, components_dir, failing_write_fs):
        generator = ComponentGenerator(config, fs=failing_write_fs(".native.js"))
        result = await generator.generate(make_request("src/components/button"))

        assert not result.succeeded
        failed = [o for o in result.components[0].outcomes if not o.success]
        assert {o.path.name for o in failed} == {"Render.native.js", "button.test.native.js"}
        assert all(o.error == "Permission denied" for o in failed)
        # No rollback of what was written.
        assert (components_dir / "button" / "Button.js").is_file()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_run_raises_first_failure(self, config, make_request, failing_write_fs):
        generator = ComponentGenerator(config, fs=failing_write_fs(".native.js"))
        with pytest.raises(FilesystemError, match="Permission denied") as exc_info:
            await generator.run(make_request("src/components/button"))
        assert exc_info.value.path.name == "Render.native.js"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_mkdir_failure_fails_every_artifact(self, config, make_request, failing_mkdir_fs):
        generator = ComponentGenerator(config, fs=failing_mkdir_fs)
        result = await generator.generate(make_request("src/components/button"))
        outcomes = result.components[0].outcomes
        assert len(outcomes) == 5
        assert all(not o.success for o in outcomes)
        assert all(o.error == "Read-only file system" for o in outcomes)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failure_isolated_to_component(self, config, make_request, failing_write_fs):
        generator = ComponentGenerator(config, fs=failing_write_fs("Input.js"))
        result = await generator.generate(make_request("src/components/button", "input"))
        button, input_ = result.components
        assert button.succeeded
        assert not input_.succeeded


class TestOrdering:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_checks_then_dirs_then_writes(self, config, make_request, recording_fs):
        generator = ComponentGenerator(config, fs=recording_fs)
        await generator.run(
            make_request("src/components/button", "input", with_container=True)
        )
        ops = [op for op, _ in recording_fs.calls]
        last_exists = max(i for i, op in enumerate(ops) if op == "exists")
        first_mkdir = ops.index("make_dirs")
        assert last_exists < first_mkdir

        for i, (op, path) in enumerate(recording_fs.calls):
            if op != "write_text":
                continue
            earlier_dirs = {p for o, p in recording_fs.calls[:i] if o == "make_dirs"}
            assert path.parent in earlier_dirs

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_one_outcome_per_artifact(self, config, make_request, recording_fs):
        generator = ComponentGenerator(config, fs=recording_fs)
        result = await generator.run(make_request("src/components/button", storybook=True))
        writes = [p for op, p in recording_fs.calls if op == "write_text"]
        assert sorted(writes) == sorted(o.path for o in result.components[0].outcomes)


class TestCreateIndex:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_writes_folder_index(self, config, make_request, components_dir):
        result = await ComponentGenerator(config).run(
            make_request("src/components/button", "input", create_index=True)
        )
        index = components_dir / "index.js"
        assert result.written_paths == [index]
        content = index.read_text(encoding="utf-8")
        assert "import button from './button'" in content
        assert "  button,\n  input\n}" in content
        assert not (components_dir / "button").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_existing_index(self, config, make_request, components_dir):
        (components_dir / "index.js").write_text("keep", encoding="utf-8")
        with pytest.raises(PathAlreadyExistsError):
            await ComponentGenerator(config).run(
                make_request("src/components/button", create_index=True)
            )
        assert (components_dir / "index.js").read_text(encoding="utf-8") == "keep"


class TestResolveTargets:
    @pytest.mark.unit
    def test_targets_beside_first(self, config, make_request, components_dir):
        targets = ComponentGenerator(config).resolve_targets(
            make_request("src/components/button/", "input")
        )
        assert [(n.raw, d) for n, d in targets] == [
            ("button", components_dir / "button"),
            ("input", components_dir / "input"),
        ]
