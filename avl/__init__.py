from avl.avl_tree import AVLTree, EmptyTreeError, InternalConsistencyError

__all__ = ["AVLTree", "EmptyTreeError", "InternalConsistencyError"]
