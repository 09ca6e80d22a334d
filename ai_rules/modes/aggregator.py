from collections.abc import Iterable
from pathlib import Path

from ai_rules.constants import MODE_DESCRIPTOR_FILENAME, ROO_MODE_RULES_DIR, ROO_MODES_FILENAME
from ai_rules.errors import SyncFileError
from ai_rules.models import Action, ActionKind, ActionStatus, SyncPlan, SyncTarget
from ai_rules.modes.models import InstructionFile, ModeAggregation
from ai_rules.modes.parser import load_descriptor, parse_mode
from ai_rules.source.models import SourceTree
from ai_rules.utils import dump_json, file_matches


def _status_for(path: Path, matches: bool) -> ActionStatus:
    if not path.exists():
        return ActionStatus.CREATE
    return ActionStatus.NOOP if matches else ActionStatus.UPDATE


class ModeAggregator:
    """Collects ``modes/<slug>/`` directories into one manifest.

    The directory name is the authoritative slug. A missing or unreadable
    descriptor drops the manifest entry but the directory's instruction
    files are still copied.
    """

    app = SyncTarget.MODES.value

    def __init__(
        self,
        manifest_filename: str = ROO_MODES_FILENAME,
        rules_dir: str = ROO_MODE_RULES_DIR,
    ) -> None:
        self.manifest_filename = manifest_filename
        self.rules_dir = rules_dir

    def aggregate(self, mode_dirs: Iterable[Path]) -> ModeAggregation:
        result = ModeAggregation()
        seen: set[str] = set()
        for mode_dir in mode_dirs:
            slug = mode_dir.name
            self._collect_definition(mode_dir, slug, seen, result)
            for child in sorted(mode_dir.iterdir(), key=lambda item: item.name):
                if child.is_file() and child.name != MODE_DESCRIPTOR_FILENAME:
                    result.instruction_files.append(InstructionFile(slug=slug, source_path=child))
        return result

    def plan(self, tree: SourceTree, output_root: Path) -> SyncPlan:
        result = self.aggregate(tree.mode_dirs)
        plan = SyncPlan(warnings=list(result.warnings))
        if result.is_empty:
            plan.warnings.append(f"No modes found, {self.manifest_filename} not written")
            return plan

        manifest_path = output_root / self.manifest_filename
        manifest = result.manifest()
        plan.actions.append(
            Action(
                ActionKind.WRITE_JSON,
                manifest_path,
                _status_for(manifest_path, file_matches(manifest_path, dump_json(manifest))),
                f"write {len(result.modes)} mode definition(s)",
                payload=manifest,
                app=self.app,
            )
        )
        for item in result.instruction_files:
            target = output_root / self.rules_dir / item.slug / item.name
            matches = target.is_file() and target.read_bytes() == item.source_path.read_bytes()
            plan.actions.append(
                Action(
                    ActionKind.COPY_FILE,
                    target,
                    _status_for(target, matches),
                    f"copy instructions for mode {item.slug}",
                    source=item.source_path,
                    app=self.app,
                )
            )
        return plan

    @staticmethod
    def _collect_definition(
        mode_dir: Path, slug: str, seen: set[str], result: ModeAggregation
    ) -> None:
        descriptor_path = mode_dir / MODE_DESCRIPTOR_FILENAME
        if not descriptor_path.is_file():
            result.warnings.append(
                f"Mode descriptor not found, definition skipped: {descriptor_path}"
            )
            return
        try:
            payload = load_descriptor(descriptor_path)
        except SyncFileError as exc:
            result.warnings.append(f"{exc}; definition skipped")
            return

        declared = payload.get("slug")
        if declared != slug:
            result.warnings.append(
                f'Slug in {descriptor_path} ("{declared}") does not match directory '
                f'name ("{slug}"), using directory name'
            )
        if slug in seen:
            result.warnings.append(f"Duplicate mode slug, definition skipped: {slug}")
            return
        seen.add(slug)
        result.modes.append(parse_mode(payload, slug))
