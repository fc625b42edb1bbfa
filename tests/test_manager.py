import threading
import unittest

from vfsmgr.config import ExplorerConfig
from vfsmgr.errors import CorruptTreeError
from vfsmgr.manager import ExplorerManager
from vfsmgr.models import ClipboardMode, Item, ItemKind
from vfsmgr.store import ItemIndex, ItemStore
from vfsmgr.util.time import now_utc


class TestExplorerManager(unittest.TestCase):
    def _names(self, mgr: ExplorerManager, folder_id: str) -> list[str]:
        return [item.name for item in mgr.children(folder_id)]

    def test_default_manager_has_only_root(self) -> None:
        mgr = ExplorerManager()
        view = mgr.view()
        self.assertEqual(view.current_folder_id, "root")
        self.assertEqual(view.children, [])
        self.assertEqual([b.name for b in view.breadcrumbs], ["Root"])

    def test_create_returns_new_id(self) -> None:
        mgr = ExplorerManager()
        result = mgr.create("notes.txt", ItemKind.FILE)
        self.assertTrue(result.ok)
        self.assertEqual(result.command, "create")
        self.assertEqual(mgr.get_item(result.value).extension, "txt")

    def test_rejected_command_returns_failed_result(self) -> None:
        mgr = ExplorerManager.with_sample_tree()
        result = mgr.move(["folder-1"], "folder-1")
        self.assertFalse(result.ok)
        self.assertEqual(result.error_kind, "CyclicMove")
        self.assertEqual(result.error_type, "CyclicMoveError")
        self.assertIn("target_id", result.error_details)

        self.assertEqual(mgr.rename("file-1", " ").error_kind, "EmptyName")
        self.assertEqual(mgr.delete(["root"]).error_kind, "ForbiddenRootDeletion")
        self.assertEqual(mgr.navigate("file-1").error_kind, "InvalidTarget")
        self.assertEqual(mgr.select("nope").error_kind, "NotFound")

    def test_scenario(self) -> None:
        mgr = ExplorerManager.with_sample_tree()
        self.assertEqual(mgr.move(["folder-1"], "folder-1").error_kind, "CyclicMove")
        self.assertTrue(mgr.move(["file-3"], "folder-3").ok)
        self.assertCountEqual(self._names(mgr, "folder-3"), ["notes.txt", "project-plan.pdf"])
        self.assertEqual(self._names(mgr, "folder-1"), ["document.pdf", "Projects"])

    def test_queries_return_copies(self) -> None:
        mgr = ExplorerManager.with_sample_tree()
        item = mgr.get_item("file-1")
        item.name = "hacked"
        item.parent_id = "nope"
        self.assertEqual(mgr.get_item("file-1").name, "document.pdf")
        self.assertIsNone(mgr.get_item("nope"))
        mgr.children("folder-1")[0].name = "hacked"
        self.assertEqual(mgr.get_item("file-1").name, "document.pdf")

    def test_view_after_navigation(self) -> None:
        mgr = ExplorerManager.with_sample_tree()
        mgr.navigate("folder-3")
        mgr.select("file-4")
        view = mgr.view()
        self.assertEqual([b.id for b in view.breadcrumbs], ["root", "folder-1", "folder-3"])
        self.assertEqual([i.id for i in view.children], ["file-4"])
        self.assertEqual(view.selected_ids, ["file-4"])
        self.assertIsNone(view.clipboard)
        self.assertIsNone(view.editing_id)

    def test_cut_and_copy_default_to_selection(self) -> None:
        mgr = ExplorerManager.with_sample_tree()
        mgr.navigate("folder-2")
        mgr.select_all()
        self.assertTrue(mgr.copy_to_clipboard().ok)
        self.assertEqual(mgr.clipboard.item_ids, ("file-2", "file-5"))
        self.assertIs(mgr.clipboard.mode, ClipboardMode.COPY)

        mgr.clear_selection()
        self.assertEqual(mgr.cut().error_kind, "InvalidArgument")
        self.assertTrue(mgr.cut(["file-2"]).ok)
        self.assertIs(mgr.clipboard.mode, ClipboardMode.CUT)

    def test_paste_cut_then_copy(self) -> None:
        mgr = ExplorerManager.with_sample_tree()
        mgr.cut(["file-2"])
        mgr.navigate("folder-1")
        self.assertEqual(mgr.paste().value, ["file-2"])
        self.assertIsNone(mgr.clipboard)
        self.assertEqual(mgr.paste().value, [])

        mgr.copy_to_clipboard(["file-1"])
        first = mgr.paste().value
        second = mgr.paste().value
        self.assertNotEqual(first, second)
        self.assertEqual(self._names(mgr, "folder-1").count("Copy of document.pdf"), 2)

    def test_drop_payloads(self) -> None:
        mgr = ExplorerManager.with_sample_tree()
        result = mgr.drop('{"itemIds": ["file-1"], "action": "move"}', "folder-2")
        self.assertTrue(result.ok)
        self.assertEqual(mgr.get_item("file-1").parent_id, "folder-2")

        result = mgr.drop({"itemIds": ["file-2"], "action": "copy"}, "folder-3")
        self.assertTrue(result.ok)
        self.assertEqual(self._names(mgr, "folder-3")[-1], "Copy of image.jpg")

        self.assertEqual(mgr.drop("{bad", "folder-3").error_kind, "InvalidArgument")
        self.assertEqual(
            mgr.drop({"itemIds": ["folder-1"]}, "folder-3").error_kind,
            "CyclicMove",
        )

    def test_shortcuts(self) -> None:
        mgr = ExplorerManager.with_sample_tree()
        mgr.navigate("folder-1")

        self.assertIsNone(mgr.handle_shortcut("x", ctrl=True))
        self.assertIsNone(mgr.handle_shortcut("Delete"))
        self.assertIsNone(mgr.handle_shortcut("v", ctrl=True))
        self.assertIsNone(mgr.handle_shortcut("q"))

        self.assertTrue(mgr.handle_shortcut("a", ctrl=True).ok)
        self.assertEqual(mgr.selected_ids, ["file-1", "file-3", "folder-3"])
        self.assertIsNone(mgr.handle_shortcut("F2"))

        mgr.select("file-3")
        self.assertTrue(mgr.handle_shortcut("F2").ok)
        self.assertEqual(mgr.view().editing_id, "file-3")
        self.assertTrue(mgr.commit_rename("todo.md").ok)
        self.assertEqual(mgr.get_item("file-3").extension, "md")

        mgr.select("file-3")
        self.assertEqual(mgr.handle_shortcut("x", ctrl=True).command, "cut")
        mgr.navigate("folder-3")
        self.assertEqual(mgr.handle_shortcut("v", ctrl=True).value, ["file-3"])

        mgr.select("file-3")
        result = mgr.handle_shortcut("Delete")
        self.assertEqual(result.value, ["file-3"])
        self.assertIsNone(mgr.get_item("file-3"))

    def test_config_keeps_selection_on_navigate(self) -> None:
        mgr = ExplorerManager.with_sample_tree(
            config=ExplorerConfig(clear_selection_on_navigate=False)
        )
        mgr.select("file-1")
        mgr.navigate("folder-2")
        self.assertEqual(mgr.selected_ids, ["file-1"])

    def test_corrupt_tree_is_raised(self) -> None:
        stamp = now_utc()
        index = ItemIndex.from_items(
            [
                Item(id="root", name="R", kind=ItemKind.FOLDER, parent_id=None, last_modified=stamp),
                Item(id="x", name="X", kind=ItemKind.FOLDER, parent_id="y", last_modified=stamp),
                Item(id="y", name="Y", kind=ItemKind.FOLDER, parent_id="x", last_modified=stamp),
            ]
        )
        mgr = ExplorerManager(ItemStore("root", index))
        self.assertTrue(mgr.navigate("x").ok)
        with self.assertRaises(CorruptTreeError):
            mgr.delete(["x"])
        with self.assertRaises(CorruptTreeError):
            mgr.breadcrumbs("x")

    def test_concurrent_commands_keep_tree_well_formed(self) -> None:
        mgr = ExplorerManager.with_sample_tree()

        def worker(n: int) -> None:
            for i in range(25):
                created = mgr.create(f"f{n}-{i}.txt", ItemKind.FILE, "folder-2")
                mgr.move([created.value], "folder-3" if i % 2 else "folder-1")
                mgr.move(["folder-3"], "folder-2" if i % 2 else "folder-1")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for item in mgr.view().children + mgr.children("folder-1") + mgr.children("folder-2"):
            parent = mgr.get_item(item.parent_id)
            self.assertIsNotNone(parent)
            self.assertTrue(parent.is_folder)
        self.assertEqual(len(mgr.children("folder-3")), 1 + 4 * 12)


if __name__ == "__main__":
    unittest.main()
