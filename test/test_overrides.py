from test_frame import prepare, test, run_tests, expect_exception

from uml_model import (ClassDiagram, ClassEntity, Member, MemberKind, Visibility, overridden_methods,
                       inherited_methods)

PUBLIC, PROTECTED, PRIVATE, PACKAGE = Visibility.PUBLIC, Visibility.PROTECTED, Visibility.PRIVATE, Visibility.PACKAGE


@prepare
def test_members():
    @test
    def value_equality():
        a = Member.new_method('speak', 'void')
        assert a == Member.new_method('speak', 'void')
        # Visibility does not take part in the comparison, name, type and kind do.
        assert a == Member.new_method('speak', 'void', PRIVATE)
        assert a != Member.new_method('speak', 'str')
        assert a != Member.new_field('speak', 'void', PUBLIC)
        assert hash(a) == hash(Member.new_method('speak', 'void', PROTECTED))

    @test
    def immutable():
        m = Member.new_field('age', 'int')
        with expect_exception(AttributeError):
            m.name = 'size'

    @test
    def uml_text():
        assert str(Member.new_method('speak', 'void')) == '+ speak(): void'
        assert str(Member.new_field('age', 'int')) == '- age: int'
        assert str(Member('bark', visibility=PROTECTED)) == '# bark()'
        assert str(Member.new_field('owner', visibility=PACKAGE)) == '~ owner'

    @test
    def member_lists():
        c = ClassEntity('Dog')
        c.add_field(Member.new_field('age', 'int'))
        c.add_method(Member.new_method('bark'))
        assert c.fields == (Member.new_field('age', 'int'),)
        assert c.methods == (Member.new_method('bark'),)
        assert c.has_method('bark')
        assert not c.has_method('age')

        c.set_methods([Member.new_method('speak'), Member.new_method('sleep')])
        assert [m.name for m in c.methods] == ['speak', 'sleep']
        c.set_fields([])
        assert c.fields == ()

        # The lists handed out can not be used to change the class.
        assert isinstance(c.methods, tuple)
        with expect_exception(AssertionError):
            c.add_field(Member.new_method('run'))
        with expect_exception(AssertionError):
            c.add_method(Member.new_field('name'))
        assert [m.kind for m in c.methods] == [MemberKind.METHOD, MemberKind.METHOD]


@prepare
def test_override_resolution():
    diagram = ClassDiagram('animals')
    animal = ClassEntity('Animal', methods=[Member.new_method('speak', 'void'), Member.new_method('eat')])
    dog = ClassEntity('Dog', methods=[Member.new_method('bark'), Member.new_method('speak', 'void')])
    diagram.add_class(animal)
    diagram.add_class(dog)
    dog.set_parent(0)

    @test
    def end_to_end():
        assert overridden_methods(dog, diagram) == [Member.new_method('speak', 'void')]
        assert dog.get_overridden_methods(diagram) == [Member.new_method('speak', 'void')]

    @test
    def no_parent_is_not_empty():
        assert overridden_methods(animal, diagram) is None
        cat = ClassEntity('Cat', methods=[Member.new_method('purr')])
        diagram.add_class(cat)
        cat.set_parent_entity(diagram, animal)
        assert cat.parent == 0
        result = overridden_methods(cat, diagram)
        assert result == [] and result is not None

    @test
    def subclass_visibility_decides():
        p = ClassEntity('P', methods=[Member.new_method('a', visibility=PUBLIC),
                                      Member.new_method('b', visibility=PRIVATE)])
        c = ClassEntity('C', methods=[Member.new_method('a', visibility=PUBLIC),
                                      Member.new_method('b', visibility=PRIVATE),
                                      Member.new_method('c', visibility=PUBLIC)])
        d = ClassDiagram()
        d.add_class(p)
        d.add_class(c)
        c.set_parent_entity(d, p)
        assert [m.name for m in overridden_methods(c, d)] == ['a']

        # A public parent method re-declared privately is not an override.
        p.set_methods([Member.new_method('b', visibility=PUBLIC)])
        assert overridden_methods(c, d) == []

        # A private parent method re-declared non-privately is: only the subclass' own visibility counts.
        p.set_methods([Member.new_method('c', visibility=PRIVATE)])
        c.set_methods([Member.new_method('c', visibility=PROTECTED)])
        assert overridden_methods(c, d) == [Member.new_method('c')]

    @test
    def subclass_order():
        p = ClassEntity('P', methods=[Member.new_method(n) for n in 'xyz'])
        c = ClassEntity('C', methods=[Member.new_method(n) for n in 'zqx'])
        d = ClassDiagram()
        d.add_class(c)
        d.add_class(p)
        c.set_parent(1)
        assert [m.name for m in overridden_methods(c, d)] == ['z', 'x']

    @test
    def single_level_only():
        d = ClassDiagram()
        grandparent = ClassEntity('Base', methods=[Member.new_method('describe')])
        parent = ClassEntity('Middle', methods=[Member.new_method('other')])
        child = ClassEntity('Leaf', methods=[Member.new_method('describe')])
        for c in [grandparent, parent, child]:
            d.add_class(c)
        parent.set_parent_entity(d, grandparent)
        child.set_parent_entity(d, parent)
        assert overridden_methods(child, d) == []

        parent.add_method(Member.new_method('describe'))
        assert overridden_methods(child, d) == [Member.new_method('describe')]

    @test
    def dangling_parent_is_no_parent():
        d = ClassDiagram()
        p = ClassEntity('P', methods=[Member.new_method('run')])
        c = ClassEntity('C', methods=[Member.new_method('run')])
        d.add_class(p)
        d.add_class(c)
        c.set_parent(0)
        c.set_parent(5)
        assert overridden_methods(c, d) is None
        assert c.get_parent_entity(d) is None
        c.set_parent(-1)
        assert c.parent is None
        assert c.asdict()['parent'] is None
        assert overridden_methods(c, d) is None
        assert ClassEntity('D', parent=-3).parent is None

    @test
    def parent_removed_from_diagram():
        d = ClassDiagram()
        p = ClassEntity('P', methods=[Member.new_method('run')])
        c = ClassEntity('C', methods=[Member.new_method('run')])
        d.add_class(c)
        d.add_class(p)
        c.set_parent_entity(d, p)
        assert c.parent == 1
        d.remove_class(p)
        assert c.parent is None
        assert overridden_methods(c, d) is None

    @test
    def earlier_class_removed():
        d = ClassDiagram()
        a = ClassEntity('A')
        p = ClassEntity('P', methods=[Member.new_method('run')])
        c = ClassEntity('C', methods=[Member.new_method('run')])
        for e in [a, p, c]:
            d.add_class(e)
        c.set_parent_entity(d, p)
        d.remove_class(a)
        assert c.parent == 0
        assert c.get_parent_entity(d) is p
        assert overridden_methods(c, d) == [Member.new_method('run')]

    @test
    def later_class_removed():
        d = ClassDiagram()
        p = ClassEntity('P')
        c = ClassEntity('C')
        z = ClassEntity('Z')
        for e in [p, c, z]:
            d.add_class(e)
        c.set_parent_entity(d, p)
        z.set_parent_entity(d, c)
        d.remove_class(c)
        assert p.parent is None
        assert z.parent is None
        assert z.get_parent_entity(d) is None
        assert c.parent == 0

    @test
    def inherited():
        assert inherited_methods(dog, diagram) == [Member.new_method('eat')]
        assert inherited_methods(animal, diagram) is None


@prepare
def test_parent_assignment():
    d = ClassDiagram()
    base = ClassEntity('Base')
    derived = ClassEntity('Derived')
    d.add_class(base)
    d.add_class(derived)

    @test
    def by_entity():
        derived.set_parent_entity(d, base)
        assert derived.parent == 0
        assert derived.get_parent_entity(d) is base

    @test
    def unknown_parent_clears():
        derived.set_parent(0)
        derived.set_parent_entity(d, ClassEntity('Base'))
        assert derived.parent is None
        assert derived.get_parent_entity(d) is None

    @test
    def remove_parent():
        derived.set_parent_entity(d, base)
        derived.remove_parent()
        assert derived.parent is None


if __name__ == '__main__':
    run_tests()
