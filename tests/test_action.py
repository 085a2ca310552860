from unittest import TestCase, main

from game2048.core import Action


class TestAction(TestCase):
    def test_is_vertical(self):
        """
        Only UP and DOWN are vertical.
        """
        cases = [(Action.UP, True), (Action.DOWN, True), (Action.LEFT, False), (Action.RIGHT, False)]
        for action, expected in cases:
            with self.subTest(action=action):
                self.assertEqual(action.is_vertical, expected)

    def test_transpose(self):
        """
        Transposition pairs UP with LEFT and DOWN with RIGHT, and is its own inverse.
        """
        cases = [
            (Action.UP, Action.LEFT),
            (Action.DOWN, Action.RIGHT),
            (Action.LEFT, Action.UP),
            (Action.RIGHT, Action.DOWN),
        ]
        for action, expected in cases:
            with self.subTest(action=action):
                self.assertIs(action.transpose(), expected)
                self.assertIs(action.transpose().transpose(), action)

    def test_from_value(self):
        """
        Actions can be looked up by their lowercase name.
        """
        self.assertIs(Action('left'), Action.LEFT)
        with self.assertRaises(ValueError):
            Action('sideways')


if __name__ == '__main__':
    main()
