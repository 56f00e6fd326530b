"""
Filesystem Tests

Node model, path resolution, permission evaluation and the portfolio
tree.

Author: Deviser
Version: 1.0.0
"""

import unittest

from devios.filesystem import (
    Node,
    NodeType,
    PathResolver,
    PermissionEvaluator,
    Actor,
    AccessKind,
    VirtualFileSystem,
    build_tree,
    validate_permissions,
    ROOT,
)
from devios.i18n import Locale


class TestNode(unittest.TestCase):
    """Test the node model."""

    def test_file_requires_default_locale(self):
        """Test that a file without default-locale content is rejected."""
        with self.assertRaises(ValueError):
            Node(NodeType.FILE, 'rw-r--r--', 'deviser', 'users', lines={Locale.EN_US: ['hi']})

    def test_content_falls_back_to_default_locale(self):
        """Test locale fallback for untranslated files."""
        node = Node.file(['你好'], 'deviser', 'users')

        self.assertEqual(node.content(Locale.ZH_TW), ['你好'])
        self.assertEqual(node.content(Locale.EN_US), ['你好'])

    def test_content_variants(self):
        """Test per-locale content."""
        node = Node.file(['你好'], 'deviser', 'users', translations={Locale.EN_US: ['hello']})

        self.assertEqual(node.content(Locale.EN_US), ['hello'])

    def test_directory_cannot_hold_lines(self):
        with self.assertRaises(ValueError):
            Node(NodeType.DIRECTORY, 'rwxr-xr-x', 'deviser', 'users', lines={Locale.ZH_TW: ['x']})

    def test_invalid_permissions(self):
        """Test permission string validation."""
        validate_permissions('rwxr-x---')

        for bad in ('rwx', 'rwxrwxrwxr', 'xwrr-xr-x', 'rwxr-xr-z'):
            with self.assertRaises(ValueError):
                validate_permissions(bad)

    def test_invalid_child_name(self):
        with self.assertRaises(ValueError):
            Node.directory({'a/b': Node.file([], 'deviser', 'users')}, 'deviser', 'users')


class TestPathResolver(unittest.TestCase):
    """Test path resolution against the portfolio tree."""

    def setUp(self):
        self.root = build_tree()

    def resolve(self, path, cwd=ROOT):
        return PathResolver.resolve(self.root, path, cwd)

    def test_absolute_paths_ignore_cwd(self):
        """Test that absolute resolution does not depend on the cwd."""
        for path in ('~/about/bio.txt', '/about/bio.txt', '~', '/', '/projects/../skills'):
            expected = self.resolve(path, ROOT)
            for cwd in ('~/about', '~/projects/terminal-portfolio', '~/.github'):
                self.assertEqual(self.resolve(path, cwd), expected, (path, cwd))

    def test_parent_of_root_is_root(self):
        """Test that '..' at the root is a no-op."""
        self.assertEqual(self.resolve('..', ROOT), self.resolve('', ROOT))
        self.assertEqual(self.resolve('../../..', ROOT).path, ROOT)

    def test_relative_paths(self):
        """Test resolution relative to the cwd."""
        resolved = self.resolve('bio.txt', '~/about')

        self.assertEqual(resolved.path, '~/about/bio.txt')
        self.assertTrue(resolved.node.is_file)
        self.assertEqual(resolved.name, 'bio.txt')

    def test_repeated_separators(self):
        self.assertEqual(self.resolve('about//bio.txt').path, '~/about/bio.txt')
        self.assertEqual(self.resolve('~/about/').path, '~/about')

    def test_dot_components(self):
        self.assertEqual(self.resolve('./about/./bio.txt').path, '~/about/bio.txt')

    def test_parent_navigation(self):
        self.assertEqual(self.resolve('../skills', '~/about').path, '~/skills')

    def test_missing_component(self):
        """Test that an unknown name resolves to nothing."""
        self.assertIsNone(self.resolve('nonexistent'))
        self.assertIsNone(self.resolve('about/missing.txt'))

    def test_file_in_middle_of_path(self):
        """Test that a file may only be the last component."""
        self.assertIsNone(self.resolve('about/bio.txt/x'))
        self.assertIsNone(self.resolve('about/bio.txt/..'))

    def test_top_levels_include_backtracked_names(self):
        """Test that names left again through .. are still reported."""
        self.assertEqual(PathResolver.top_levels('about/..'), {'about'})
        self.assertEqual(PathResolver.top_levels('about/../resume.pdf'), {'about', 'resume.pdf'})
        self.assertEqual(PathResolver.top_levels('../bio.txt', '~/about'), {'about', 'bio.txt'})
        self.assertEqual(PathResolver.top_levels('~'), set())
        self.assertEqual(PathResolver.top_levels('bio.txt', '~/about'), {'about'})


class TestPermissionEvaluator(unittest.TestCase):
    """Test rwx permission checks."""

    def setUp(self):
        self.node = Node.file(['x'], 'alice', 'staff', permissions='rw-r-----')

    def test_owner_triplet(self):
        alice = Actor('alice', frozenset({'staff'}))

        self.assertTrue(PermissionEvaluator.can_read(self.node, alice))
        self.assertTrue(PermissionEvaluator.can_write(self.node, alice))
        self.assertFalse(PermissionEvaluator.can_execute(self.node, alice))

    def test_group_triplet(self):
        bob = Actor('bob', frozenset({'staff'}))

        self.assertTrue(PermissionEvaluator.can_read(self.node, bob))
        self.assertFalse(PermissionEvaluator.can_write(self.node, bob))

    def test_other_triplet(self):
        eve = Actor('eve', frozenset({'users'}))

        for kind in AccessKind:
            self.assertFalse(PermissionEvaluator.check(self.node, eve, kind))

    def test_first_match_wins(self):
        """Test that the owner triplet is used even when the group grants more."""
        node = Node.file(['x'], 'alice', 'staff', permissions='---rwxrwx')
        alice = Actor('alice', frozenset({'staff'}))

        for kind in AccessKind:
            self.assertFalse(PermissionEvaluator.check(node, alice, kind))

    def test_privileged_always_allowed(self):
        node = Node.file(['x'], 'alice', 'staff', permissions='---------')
        root = Actor('eve', privileged=True)

        for kind in AccessKind:
            self.assertTrue(PermissionEvaluator.check(node, root, kind))

    def test_check_is_deterministic(self):
        bob = Actor('bob', frozenset({'staff'}))
        results = {PermissionEvaluator.check(self.node, bob, AccessKind.READ) for _ in range(5)}

        self.assertEqual(results, {True})

    def test_access_kind_letters(self):
        self.assertEqual([kind.letter for kind in AccessKind], ['r', 'w', 'x'])


class TestVirtualFileSystem(unittest.TestCase):
    """Test the portfolio tree and listings."""

    def setUp(self):
        self.vfs = VirtualFileSystem()

    def test_lookup(self):
        """Test absolute lookup."""
        self.assertTrue(self.vfs.lookup('~/about/bio.txt').is_file)
        self.assertTrue(self.vfs.lookup('/projects').is_directory)
        self.assertIsNone(self.vfs.lookup('about'))
        self.assertIsNone(self.vfs.lookup('~/nowhere'))

    def test_tree_sections(self):
        names = set(self.vfs.list_children(self.vfs.root))

        self.assertEqual(
            names,
            {'about', 'skills', 'projects', 'contact', '.github', 'resume.pdf', '.bashrc'}
        )

    def test_readdir_sorting(self):
        """Test directories before files, then by name."""
        names = [name for name, _ in self.vfs.readdir(self.vfs.root, show_hidden=True)]

        self.assertEqual(
            names,
            ['.github', 'about', 'contact', 'projects', 'skills', '.bashrc', 'resume.pdf']
        )

    def test_readdir_hides_dotfiles(self):
        names = [name for name, _ in self.vfs.readdir(self.vfs.root)]

        self.assertNotIn('.bashrc', names)
        self.assertNotIn('.github', names)

    def test_readdir_hide(self):
        names = [name for name, _ in self.vfs.readdir(self.vfs.root, hide={'about', 'skills'})]

        self.assertEqual(names, ['contact', 'projects', 'resume.pdf'])

    def test_list_children_of_file(self):
        with self.assertRaises(ValueError):
            self.vfs.list_children(self.vfs.lookup('~/resume.pdf'))

    def test_ownership(self):
        vfs = VirtualFileSystem(owner='root', group='wheel')
        node = vfs.lookup('~/about/bio.txt')

        self.assertEqual((node.owner, node.group), ('root', 'wheel'))

    def test_bilingual_bio(self):
        bio = self.vfs.lookup('~/about/bio.txt')

        self.assertEqual(bio.content(Locale.ZH_TW)[0], '====== 關於我 ======')
        self.assertEqual(bio.content(Locale.EN_US)[0], '====== About Me ======')

    def test_stats(self):
        stats = self.vfs.get_stats()

        self.assertGreater(stats['files'], 10)
        self.assertGreater(stats['directories'], 5)

    def test_snapshot_is_stable(self):
        self.assertEqual(self.vfs.snapshot(), self.vfs.snapshot())

    def test_root_must_be_directory(self):
        with self.assertRaises(ValueError):
            VirtualFileSystem(root=Node.file(['x'], 'deviser', 'users'))


if __name__ == '__main__':
    unittest.main()
