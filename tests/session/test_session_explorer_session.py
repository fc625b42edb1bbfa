import unittest

from vfsmgr.config import ExplorerConfig
from vfsmgr.errors import (
    CyclicMoveError,
    InvalidArgumentError,
    InvalidStateError,
    InvalidTargetError,
    NotFoundError,
)
from vfsmgr.models import ClipboardMode, ItemKind
from vfsmgr.sample import SAMPLE_ROOT_ID, sample_items
from vfsmgr.session import ExplorerSession
from vfsmgr.store import ItemStore

# Sample tree:
#   root -> folder-1 Documents -> {file-1 document.pdf, file-3 notes.txt,
#                                  folder-3 Projects -> file-4 project-plan.pdf}
#   root -> folder-2 Images -> {file-2 image.jpg, file-5 background.png}


class TestExplorerSession(unittest.TestCase):
    def _make_session(self, **config) -> ExplorerSession:
        store = ItemStore.from_items(SAMPLE_ROOT_ID, sample_items())
        return ExplorerSession(store, config=ExplorerConfig(**config))

    def _child_names(self, session: ExplorerSession, folder_id: str) -> list[str]:
        return [item.name for item in session.store.list_children(folder_id)]

    # ----------------------------
    # Navigation / selection
    # ----------------------------
    def test_starts_at_root(self) -> None:
        session = self._make_session()
        self.assertEqual(session.current_folder_id, "root")
        self.assertEqual(session.selected_ids, [])
        self.assertIsNone(session.clipboard)

    def test_navigate_clears_edit_and_selection(self) -> None:
        session = self._make_session()
        session.select("folder-1")
        session.begin_rename("folder-1")
        session.set_current_folder("folder-1")
        self.assertEqual(session.current_folder_id, "folder-1")
        self.assertIsNone(session.editing_id)
        self.assertEqual(session.selected_ids, [])

    def test_navigate_can_keep_selection(self) -> None:
        session = self._make_session(clear_selection_on_navigate=False)
        session.select("folder-1")
        session.set_current_folder("folder-2")
        self.assertEqual(session.selected_ids, ["folder-1"])

    def test_navigate_rejections(self) -> None:
        session = self._make_session()
        with self.assertRaises(NotFoundError):
            session.set_current_folder("nope")
        with self.assertRaises(InvalidTargetError):
            session.set_current_folder("file-1")
        self.assertEqual(session.current_folder_id, "root")

    def test_selection_toggling(self) -> None:
        session = self._make_session()
        session.select("folder-1", additive=False)
        session.select("folder-2", additive=True)
        self.assertEqual(session.selected_ids, ["folder-1", "folder-2"])
        session.select("folder-1", additive=True)
        self.assertEqual(session.selected_ids, ["folder-2"])
        session.select("folder-1")
        self.assertEqual(session.selected_ids, ["folder-1"])
        with self.assertRaises(NotFoundError):
            session.select("nope")

    def test_select_all_uses_current_folder(self) -> None:
        session = self._make_session()
        session.set_current_folder("folder-1")
        session.select_all()
        self.assertEqual(session.selected_ids, ["file-1", "file-3", "folder-3"])
        session.clear_selection()
        self.assertEqual(session.selected_ids, [])

    def test_state_is_a_copy(self) -> None:
        session = self._make_session()
        session.select("folder-1")
        state = session.state
        state.selected_ids.append("folder-2")
        self.assertEqual(session.selected_ids, ["folder-1"])

    # ----------------------------
    # Clipboard
    # ----------------------------
    def test_cut_paste_is_one_shot(self) -> None:
        session = self._make_session()
        session.set_current_folder("folder-1")
        session.cut(["file-3"])
        clip = session.clipboard
        self.assertIs(clip.mode, ClipboardMode.CUT)
        self.assertEqual(clip.source_folder_id, "folder-1")

        session.set_current_folder("folder-3")
        self.assertEqual(session.paste(), ["file-3"])
        self.assertEqual(session.store.get_by_id("file-3").parent_id, "folder-3")
        self.assertIsNone(session.clipboard)

        self.assertEqual(session.paste(), [])
        self.assertEqual(self._child_names(session, "folder-3"), ["notes.txt", "project-plan.pdf"])

    def test_copy_paste_is_repeatable(self) -> None:
        session = self._make_session()
        session.copy(["file-3"])
        session.set_current_folder("folder-2")
        first = session.paste()
        second = session.paste()
        self.assertEqual(len(first), 1)
        self.assertEqual(len(second), 1)
        self.assertNotEqual(first[0], second[0])
        self.assertIsNotNone(session.clipboard)
        self.assertEqual(
            self._child_names(session, "folder-2"),
            ["image.jpg", "background.png", "Copy of notes.txt", "Copy of notes.txt"],
        )
        self.assertEqual(session.store.get_by_id("file-3").parent_id, "folder-1")

    def test_copy_paste_deep_when_configured(self) -> None:
        session = self._make_session(deep_copy_folders=True, copy_name_prefix="Dup ")
        session.copy(["folder-3"])
        session.set_current_folder("folder-2")
        [new_id] = session.paste()
        self.assertEqual(session.store.get_by_id(new_id).name, "Dup Projects")
        self.assertEqual(self._child_names(session, new_id), ["project-plan.pdf"])

    def test_new_capture_replaces_clipboard(self) -> None:
        session = self._make_session()
        session.cut(["file-1"])
        session.copy(["file-2", "file-2", "file-5"])
        clip = session.clipboard
        self.assertIs(clip.mode, ClipboardMode.COPY)
        self.assertEqual(clip.item_ids, ("file-2", "file-5"))
        session.clear_clipboard()
        self.assertIsNone(session.clipboard)
        with self.assertRaises(InvalidArgumentError):
            session.cut([])

    def test_failed_cut_paste_keeps_clipboard(self) -> None:
        session = self._make_session()
        session.cut(["folder-1"])
        session.set_current_folder("folder-3")
        with self.assertRaises(CyclicMoveError):
            session.paste()
        self.assertIsNotNone(session.clipboard)
        self.assertEqual(session.store.get_by_id("folder-1").parent_id, "root")

    # ----------------------------
    # Mutations
    # ----------------------------
    def test_create_defaults_to_current_folder(self) -> None:
        session = self._make_session()
        session.set_current_folder("folder-2")
        new_id = session.create("logo.svg", ItemKind.FILE, size=300)
        item = session.store.get_by_id(new_id)
        self.assertEqual(item.parent_id, "folder-2")
        self.assertEqual(item.size, 300)
        other = session.create("Archive", ItemKind.FOLDER, "root")
        self.assertEqual(session.store.get_by_id(other).parent_id, "root")

    def test_move_clears_selection(self) -> None:
        session = self._make_session()
        session.select("file-1")
        session.move(["file-1"], "folder-2")
        self.assertEqual(session.selected_ids, [])

    def test_delete_prunes_session_state(self) -> None:
        session = self._make_session()
        session.set_current_folder("folder-3")
        session.copy(["file-4", "file-2"])
        session.select("file-4")

        removed = session.delete(["folder-1"])
        self.assertIn("file-4", removed)
        self.assertEqual(session.current_folder_id, "root")
        self.assertEqual(session.selected_ids, [])
        self.assertEqual(session.clipboard.item_ids, ("file-2",))

        session.delete(["file-2"])
        self.assertIsNone(session.clipboard)

    def test_delete_current_folder_falls_back_to_parent(self) -> None:
        session = self._make_session()
        session.set_current_folder("folder-3")
        session.delete(["folder-3"])
        self.assertEqual(session.current_folder_id, "folder-1")

    # ----------------------------
    # Rename editing
    # ----------------------------
    def test_rename_edit_flow(self) -> None:
        session = self._make_session()
        session.begin_rename("file-3")
        self.assertEqual(session.editing_id, "file-3")
        self.assertFalse(session.commit_rename("notes.txt"))
        self.assertIsNone(session.editing_id)

        session.begin_rename("file-3")
        self.assertTrue(session.commit_rename("todo"))
        item = session.store.get_by_id("file-3")
        self.assertEqual(item.name, "todo")
        self.assertIsNone(item.extension)

        session.begin_rename("file-3")
        session.cancel_rename()
        self.assertIsNone(session.editing_id)
        with self.assertRaises(InvalidStateError):
            session.commit_rename("x")

    def test_rename_edit_on_deleted_item(self) -> None:
        session = self._make_session()
        session.begin_rename("file-3")
        session.delete(["file-3"])
        self.assertIsNone(session.editing_id)


if __name__ == "__main__":
    unittest.main()
