"""Tests for the ordered tree factory"""
# pylint: skip-file

import unittest

from ordered_trees.factory import make_ordered_tree_classes, create_ordered_tree
from ordered_trees.ordered_tree_base import OrderedTreeBase, OrderedNodeBase


class TestMakeOrderedTreeClasses(unittest.TestCase):
    def test_classes_are_cached_per_key_type(self):
        first = make_ordered_tree_classes(int)
        second = make_ordered_tree_classes(int)
        self.assertIs(first[0], second[0])
        self.assertIs(first[1], second[1])
        self.assertIsNot(make_ordered_tree_classes(str)[0], first[0])

    def test_classes_reference_each_other(self):
        TreeT, NodeT = make_ordered_tree_classes(int)
        self.assertEqual(TreeT.__name__, "OrderedTree_int")
        self.assertEqual(NodeT.__name__, "OrderedNode_int")
        self.assertIs(TreeT.NodeClass, NodeT)
        self.assertIs(NodeT.TreeClass, TreeT)
        self.assertIs(TreeT.KeyType, int)
        self.assertTrue(issubclass(TreeT, OrderedTreeBase))
        self.assertTrue(issubclass(NodeT, OrderedNodeBase))

    def test_no_key_type_returns_base_classes(self):
        TreeT, NodeT = make_ordered_tree_classes()
        self.assertIs(TreeT, OrderedTreeBase)
        self.assertIs(NodeT, OrderedNodeBase)
        self.assertIsNone(TreeT.KeyType)

    def test_key_type_must_be_a_type(self):
        with self.assertRaises(TypeError):
            make_ordered_tree_classes("int")

    def test_nodes_and_children_use_generated_classes(self):
        TreeT, NodeT = make_ordered_tree_classes(int)
        tree = TreeT().insert(2, "b").insert(1, "a").insert(3, "c")
        for handle in (tree, tree.node.left, tree.node.right):
            self.assertIsInstance(handle, TreeT)
            self.assertIsInstance(handle.node, NodeT)
        self.assertIsInstance(tree.node.left.node.left, TreeT)


class TestCreateOrderedTree(unittest.TestCase):
    def test_create_empty_tree(self):
        tree = create_ordered_tree()
        self.assertTrue(tree.is_empty())
        self.assertIsInstance(tree, OrderedTreeBase)

    def test_create_with_items_respects_insertion_order(self):
        tree = create_ordered_tree(str, [("m", 1), ("c", 2), ("x", 3)])
        self.assertEqual(tree.node.item.key, "m")
        self.assertEqual(list(tree.items()), [("c", 2), ("m", 1), ("x", 3)])
        self.assertEqual(tree.height(), 2)

    def test_created_tree_checks_key_type(self):
        tree = create_ordered_tree(str, [("a", 1)])
        with self.assertRaises(TypeError):
            tree.insert(1, "a")
        with self.assertRaises(TypeError):
            tree.search(1)
        with self.assertRaises(TypeError):
            tree.delete(1)
        with self.assertRaises(TypeError):
            tree.sub_tree(0, "z")

    def test_create_with_invalid_items_raises(self):
        with self.assertRaises(TypeError):
            create_ordered_tree(int, [(1, "a"), ("2", "b")])

    def test_create_with_repeated_keys_keeps_last_value(self):
        tree = create_ordered_tree(int, [(1, "a"), (1, "b")])
        self.assertEqual(tree.size(), 1)
        self.assertEqual(tree.search(1), "b")


if __name__ == "__main__":
    unittest.main()
