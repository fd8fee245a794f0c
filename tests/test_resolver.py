"""Tests for template resolvers."""

from viewrender.resolver import AggregateResolver, TemplateMapResolver, TemplatePathStack


class StaticResolver:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def resolve(self, name):
        self.calls.append(name)
        return self.result


class TestTemplateMapResolver:
    def test_resolve(self):
        resolver = TemplateMapResolver({"home": "home.phtml"})
        assert resolver.resolve("home") == "home.phtml"
        assert resolver.resolve("other") is None

    def test_add(self):
        resolver = TemplateMapResolver()
        resolver.add("home", "home.html")
        assert resolver.has("home")
        assert resolver.map == {"home": "home.html"}

    def test_map_is_copied(self):
        source = {"home": "home.html"}
        resolver = TemplateMapResolver(source)
        source["other"] = "other.html"
        assert not resolver.has("other")


class TestAggregateResolver:
    def test_empty(self):
        assert AggregateResolver().resolve("home") is None

    def test_higher_priority_first(self):
        aggregate = AggregateResolver()
        low = StaticResolver("low.html")
        high = StaticResolver("high.html")
        aggregate.attach(low, 0)
        aggregate.attach(high, 100)
        assert aggregate.resolvers == [high, low]
        assert aggregate.resolve("home") == "high.html"
        assert low.calls == []

    def test_same_priority_keeps_attach_order(self):
        aggregate = AggregateResolver()
        first = StaticResolver("first.html")
        second = StaticResolver("second.html")
        aggregate.attach(first)
        aggregate.attach(second)
        assert aggregate.resolve("home") == "first.html"

    def test_falls_through_unresolved(self):
        aggregate = AggregateResolver()
        aggregate.attach(StaticResolver(None), 10)
        aggregate.attach(StaticResolver("found.html"), 1)
        assert aggregate.resolve("home") == "found.html"
        assert len(aggregate) == 2


class TestTemplatePathStack:
    def test_default_namespace(self, templates_dir):
        stack = TemplatePathStack()
        stack.add_path(str(templates_dir / "shared"))
        assert stack.resolve("footer") == str(templates_dir / "shared" / "footer.html")

    def test_explicit_extension(self, templates_dir):
        stack = TemplatePathStack()
        stack.add_path(str(templates_dir / "app"), "app")
        assert stack.resolve("app::home.html") == str(templates_dir / "app" / "home.html")

    def test_namespace_falls_back_to_default(self, templates_dir):
        stack = TemplatePathStack()
        stack.add_path(str(templates_dir / "app"), "app")
        stack.add_path(str(templates_dir / "shared"))
        assert stack.resolve("app::footer") == str(templates_dir / "shared" / "footer.html")

    def test_default_does_not_see_namespaces(self, templates_dir):
        stack = TemplatePathStack()
        stack.add_path(str(templates_dir / "app"), "app")
        assert stack.resolve("home") is None

    def test_later_paths_win(self, templates_dir):
        stack = TemplatePathStack()
        stack.add_path(str(templates_dir / "app"), "app")
        stack.add_path(str(templates_dir / "override"), "app")
        assert stack.resolve("app::home") == str(templates_dir / "override" / "home.html")

    def test_parent_directory_is_refused(self, templates_dir):
        stack = TemplatePathStack()
        stack.add_path(str(templates_dir / "app"))
        assert stack.resolve("../shared/footer") is None

    def test_absolute_name_is_refused(self, tmp_path):
        (tmp_path / "views").mkdir()
        secret = tmp_path / "secret.txt"
        secret.write_text("secret")
        stack = TemplatePathStack()
        stack.add_path(str(tmp_path / "views"))
        assert stack.resolve(str(secret)) is None
        assert stack.resolve(f"app::{secret}") is None

    def test_symlink_outside_directory_is_refused(self, tmp_path):
        views = tmp_path / "views"
        views.mkdir()
        (tmp_path / "secret.html").write_text("secret")
        (views / "link.html").symlink_to(tmp_path / "secret.html")
        stack = TemplatePathStack()
        stack.add_path(str(views))
        assert stack.resolve("link") is None

    def test_get_paths(self):
        stack = TemplatePathStack()
        stack.add_path("views/", "app")
        stack.add_path("shared/")
        assert stack.get_paths() == {"app": ["views/"], None: ["shared/"]}
