"""Tests for the demo program's layout helper and scripted output."""

import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from avl import demo
from avl.avl_tree import AVLTree


class TestTreeLayout(unittest.TestCase):
    def test_layout_uses_in_order_index_and_depth(self):
        tree: AVLTree[int] = AVLTree()
        for v in [10, 20, 30]:
            tree.insert(v)
        positions, edges = demo.tree_layout(tree)
        self.assertEqual(positions, {10: (0.0, -1.0), 20: (1.0, 0.0), 30: (2.0, -1.0)})
        self.assertEqual(sorted(edges), [(20, 10), (20, 30)])

    def test_layout_of_empty_tree(self):
        positions, edges = demo.tree_layout(AVLTree())
        self.assertEqual(positions, {})
        self.assertEqual(edges, [])

    def test_edge_count_is_one_less_than_nodes(self):
        tree: AVLTree[int] = AVLTree()
        for v in range(31):
            tree.insert(v)
        positions, edges = demo.tree_layout(tree)
        self.assertEqual(len(positions), 31)
        self.assertEqual(len(edges), 30)
        xs = [positions[v][0] for v in tree.in_order()]
        self.assertEqual(xs, sorted(xs))


class TestScriptedOperations(unittest.TestCase):
    def test_example_output(self):
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(demo, "VIZ_DIR", Path(tmp)):
                out = io.StringIO()
                with contextlib.redirect_stdout(out):
                    _, tree = demo.example_1_scripted_operations()
                self.assertTrue((Path(tmp) / "01_tree_structure.png").exists())

        text = out.getvalue()
        self.assertIn("-5 -3 0 1 2 3 4 9 12 56", text)
        self.assertIn("There are 3 nodes larger than 5.", text)
        self.assertIn("Largest node: 56", text)
        self.assertIn("Smallest node: -5", text)
        self.assertIn("Node with value 2 deleted.", text)
        self.assertIn("-5 -3 0 1 3 4 9 12 56", text)
        self.assertIn("Number of nodes between 1 and 15: 5", text)
        self.assertTrue(tree.validate())

    def test_successor_walk(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            chain = demo.example_4_successor_walk()
        self.assertEqual(chain, sorted(demo.SCRIPTED_VALUES))
        self.assertIn("next(7) for an absent value: None", out.getvalue())


if __name__ == '__main__':
    unittest.main()
