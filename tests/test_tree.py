# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for TreeNode, value nodes and subscriptions."""

import math

import pytest

from genro_conf import BrickColor, CFrame, Color3, Ray, TreeError, Vector3
from genro_conf.tree import (
    BoolValue,
    Configuration,
    Folder,
    IntValue,
    NumberValue,
    ObjectValue,
    StringValue,
    TreeNode,
    ValueBase,
    Vector3Value,
    create_node,
)


class TestTreeNode:
    """Tests for TreeNode structure."""

    def test_default_name_is_class_name(self):
        """Test a node without name is named after its kind."""
        assert Configuration().name == 'Configuration'
        assert Folder('stuff').name == 'stuff'

    def test_parent_appends_child(self):
        """Test setting parent adds the node to the children."""
        root = Configuration()
        a = Folder('a', parent=root)
        b = Folder('b')
        b.parent = root
        assert root.get_children() == [a, b]
        assert a.parent is root

    def test_get_children_is_snapshot(self):
        """Test get_children returns a copy."""
        root = Configuration()
        Folder('a', parent=root)
        children = root.get_children()
        children.clear()
        assert len(root.get_children()) == 1

    def test_siblings_may_share_name(self):
        """Test two children can have the same name."""
        root = Configuration()
        BoolValue('apples', parent=root)
        NumberValue('apples', parent=root)
        assert [c.name for c in root.get_children()] == ['apples', 'apples']

    def test_reparent_moves_node(self):
        """Test moving a node between parents."""
        first = Folder('first')
        second = Folder('second')
        node = StringValue('s', parent=first)
        node.parent = second
        assert first.get_children() == []
        assert second.get_children() == [node]

    def test_circular_parent_raises(self):
        """Test a node cannot become its own ancestor."""
        a = Folder('a')
        b = Folder('b', parent=a)
        with pytest.raises(TreeError, match="circular"):
            a.parent = b

    def test_is_a_follows_hierarchy(self):
        """Test is_a matches the kind and its base classes."""
        node = BoolValue()
        assert node.is_a('BoolValue')
        assert node.is_a('ValueBase')
        assert node.is_a('TreeNode')
        assert not node.is_a('NumberValue')
        assert node.kind == 'BoolValue'

    def test_get_full_name(self):
        """Test full name joins ancestor names."""
        root = Configuration('settings')
        folder = Folder('audio', parent=root)
        node = NumberValue('volume', parent=folder)
        assert node.get_full_name() == 'settings.audio.volume'

    def test_find_first_child(self):
        """Test find_first_child by name and kind."""
        root = Configuration()
        flag = BoolValue('apples', parent=root)
        count = NumberValue('apples', parent=root)
        assert root.find_first_child('apples') is flag
        assert root.find_first_child('apples', 'NumberValue') is count
        assert root.find_first_child('pears') is None

    def test_destroy_detaches_and_locks(self):
        """Test destroy removes the node and locks its parent."""
        root = Configuration()
        node = BoolValue('flag', parent=root)
        node.destroy()
        assert root.get_children() == []
        assert node.parent is None
        assert node.destroyed
        with pytest.raises(TreeError, match="locked"):
            node.parent = root

    def test_destroy_descendants(self):
        """Test destroy recurses into children."""
        folder = Folder('f')
        child = StringValue('s', parent=folder)
        folder.destroy()
        assert child.destroyed
        assert folder.get_children() == []

    def test_destroy_twice(self):
        """Test a second destroy is a no-op."""
        node = BoolValue()
        node.destroy()
        node.destroy()
        assert node.destroyed

    def test_cannot_parent_under_destroyed(self):
        """Test a destroyed node cannot receive children."""
        folder = Folder('f')
        folder.destroy()
        with pytest.raises(TreeError):
            BoolValue('x').parent = folder


class TestValueNodes:
    """Tests for value node kinds."""

    def test_defaults(self):
        """Test each kind starts with its default value."""
        assert BoolValue().value is False
        assert NumberValue().value == 0
        assert StringValue().value == ''
        assert ObjectValue().value is None
        assert Vector3Value().value == Vector3()

    def test_initial_value(self):
        """Test value passed to the constructor."""
        assert StringValue('s', value='hello').value == 'hello'

    def test_rejects_wrong_type(self):
        """Test assigning a value of the wrong type raises TypeError."""
        node = NumberValue()
        with pytest.raises(TypeError, match="NumberValue"):
            node.value = 'ten'

    def test_number_rejects_bool(self):
        """Test bool is not accepted as a number."""
        with pytest.raises(TypeError):
            NumberValue().value = True
        with pytest.raises(TypeError):
            IntValue().value = False

    def test_number_accepts_int_and_float(self):
        """Test NumberValue holds ints and floats."""
        node = NumberValue()
        node.value = 3
        assert node.value == 3
        node.value = 2.5
        assert node.value == 2.5

    def test_number_rejects_unsafe_int(self):
        """Test ints beyond double precision are rejected by NumberValue only."""
        with pytest.raises(TypeError, match="NumberValue"):
            NumberValue().value = 2 ** 53 + 1
        NumberValue().value = -(2 ** 53)
        node = IntValue()
        node.value = 2 ** 60
        assert node.value == 2 ** 60

    def test_object_value_holds_node_or_none(self):
        """Test ObjectValue holds references and None."""
        target = Folder('target')
        node = ObjectValue()
        node.value = target
        assert node.value is target
        node.value = None
        assert node.value is None
        with pytest.raises(TypeError):
            node.value = 'target'

    def test_only_object_value_is_nullable(self):
        """Test None is rejected by non-reference kinds."""
        with pytest.raises(TypeError):
            BoolValue().value = None

    def test_repr(self):
        """Test string representation."""
        assert repr(BoolValue('flag', value=True)) == "BoolValue('flag', value=True)"


class TestCreateNode:
    """Tests for the create_node factory."""

    @pytest.mark.parametrize('kind', [
        'BoolValue', 'NumberValue', 'IntValue', 'StringValue', 'ObjectValue',
        'Vector3Value', 'Color3Value', 'RayValue', 'BrickColorValue', 'CFrameValue',
        'Configuration', 'Folder',
    ])
    def test_create_known_kinds(self, kind):
        """Test every concrete kind can be created."""
        node = create_node(kind)
        assert node.is_a(kind)
        assert node.parent is None

    def test_abstract_kinds_not_creatable(self):
        """Test base classes cannot be created."""
        with pytest.raises(ValueError):
            create_node('ValueBase')
        with pytest.raises(ValueError):
            create_node('TreeNode')

    def test_unknown_kind_raises(self):
        """Test unknown kinds raise ValueError."""
        with pytest.raises(ValueError, match="Sparkles"):
            create_node('Sparkles')

    def test_subclass_is_registered(self):
        """Test a new concrete ValueBase subclass becomes creatable."""

        class BytesValue(ValueBase):
            __slots__ = ()
            value_types = (bytes,)
            default = b''

        node = create_node('BytesValue')
        assert isinstance(node, BytesValue)


class TestSubscriptions:
    """Tests for child insert/delete notifications."""

    def test_insert_and_delete_events(self):
        """Test callbacks receive node, parent, index and event."""
        root = Configuration()
        events = []

        def on_event(node, parent, ind, evt):
            events.append((evt, node.name, parent, ind))

        root.subscribe('test', any=on_event)
        Folder('a', parent=root)
        b = Folder('b', parent=root)
        b.destroy()

        assert events == [
            ('ins', 'a', root, 0),
            ('ins', 'b', root, 1),
            ('del', 'b', root, 1),
        ]

    def test_move_notifies_both_parents(self):
        """Test reparenting fires delete on the old parent then insert on the new one."""
        first = Folder('first')
        second = Folder('second')
        node = BoolValue('flag', parent=first)
        events = []
        first.subscribe('t', delete=lambda node, evt, **kw: events.append((evt, 'first')))
        second.subscribe('t', insert=lambda node, evt, **kw: events.append((evt, 'second')))
        node.parent = second
        assert events == [('del', 'first'), ('ins', 'second')]

    def test_unsubscribe(self):
        """Test callbacks stop after unsubscribe."""
        root = Configuration()
        events = []
        root.subscribe('test', insert=lambda **kw: events.append(kw['evt']))
        assert root.is_subscribed('test')
        root.unsubscribe('test', insert=True)
        assert not root.is_subscribed('test')
        Folder('a', parent=root)
        assert events == []

    def test_unsubscribe_unknown_id(self):
        """Test unsubscribing an unknown id is ignored."""
        Configuration().unsubscribe('nobody', any=True)

    def test_subscribe_same_id_replaces(self):
        """Test subscribing twice with the same id keeps one callback."""
        root = Configuration()
        calls = []
        root.subscribe('test', insert=lambda **kw: calls.append(1))
        root.subscribe('test', insert=lambda **kw: calls.append(2))
        Folder('a', parent=root)
        assert calls == [2]

    def test_rename_is_not_notified(self):
        """Test renaming a child fires no event."""
        root = Configuration()
        node = Folder('a', parent=root)
        events = []
        root.subscribe('test', any=lambda **kw: events.append(kw))
        node.name = 'b'
        assert events == []


class TestDatatypes:
    """Tests for Vector3, Color3 and Ray."""

    def test_vector_arithmetic(self):
        """Test vector add, sub, scale and magnitude."""
        v = Vector3(1, 2, 3)
        assert v + Vector3(1, 1, 1) == Vector3(2, 3, 4)
        assert v - v == Vector3()
        assert v * 2 == Vector3(2, 4, 6)
        assert Vector3(3, 4, 0).magnitude == 5

    def test_color_range(self):
        """Test Color3 components must be between 0 and 1."""
        with pytest.raises(ValueError, match="Color3.g"):
            Color3(0, 2, 0)

    def test_color_from_rgb(self):
        """Test building a color from byte components."""
        color = Color3.from_rgb(255, 0, 255)
        assert color == Color3(1, 0, 1)
        assert color.to_hex() == 'ff00ff'

    def test_ray_point_at(self):
        """Test walking along a ray."""
        ray = Ray(Vector3(1, 0, 0), Vector3(0, 1, 0))
        assert ray.point_at(3) == Vector3(1, 3, 0)

    def test_datatypes_are_hashable(self):
        """Test frozen value types can be used as dict keys."""
        assert {Vector3(1, 2, 3): 'a'}[Vector3(1, 2, 3)] == 'a'

    def test_brick_color_palette(self):
        """Test BrickColor lookup by number and name."""
        red = BrickColor.by_name('Bright red')
        assert red == BrickColor(21)
        assert red.name == 'Bright red'
        assert red.color == Color3.from_rgb(196, 40, 28)
        assert BrickColor().name == 'Medium stone grey'

    def test_brick_color_unknown(self):
        """Test unknown palette entries raise ValueError."""
        with pytest.raises(ValueError, match="number 999"):
            BrickColor(999)
        with pytest.raises(ValueError, match="Hot pink"):
            BrickColor.by_name('Hot pink')

    def test_cframe_translation(self):
        """Test composing translations and transforming points."""
        frame = CFrame(Vector3(1, 2, 3))
        assert frame * Vector3(1, 1, 1) == Vector3(2, 3, 4)
        assert (frame * CFrame(Vector3(1, 0, 0))).position == Vector3(2, 2, 3)
        assert frame.look_vector == Vector3(0, 0, -1)

    def test_cframe_rotation_and_inverse(self):
        """Test a quarter turn around Z and its inverse."""
        frame = CFrame.from_euler_xyz(0, 0, math.pi / 2, Vector3(5, 0, 0))
        point = frame * Vector3(1, 0, 0)
        assert (point.x, point.y, point.z) == pytest.approx((5, 1, 0))
        back = frame.inverse() * point
        assert (back.x, back.y, back.z) == pytest.approx((1, 0, 0))

    def test_cframe_needs_nine_components(self):
        """Test a malformed rotation matrix is rejected."""
        with pytest.raises(ValueError, match="9 components"):
            CFrame(Vector3(), (1, 0, 0))
