from typing import Annotated, Optional

from iodocs_generator.introspect.annotations import AnnotationSource
from iodocs_generator.introspect.registry import EndpointRegistry
from iodocs_generator.tags import GET, POST, REQUIRED, Tag, TagKind, description, path, query


@path("/base")
class BaseApi:
    @GET
    @path("/inherited")
    def inherited(self):
        pass

    def _private(self):
        pass


class ChildApi(BaseApi):
    @POST
    @description("first")
    @description("second")
    def create(self, limit: Annotated[int, query("limit"), REQUIRED], *args, **kwargs):
        pass

    @GET
    def optional(self, q: Annotated[Optional[str], query("q")] = None, other: Optional[int] = None):
        pass

    @staticmethod
    @GET
    def static(q: Annotated[str, query("q")]):
        pass

    version = "1"


class TestAnnotationSource:
    def test_class_tags(self):
        source = AnnotationSource()
        assert source.class_tags(BaseApi) == (path("/base"),)
        # class tags are not inherited
        assert source.class_tags(ChildApi) == ()

    def test_declared_then_inherited_public_methods(self):
        names = [m.name for m in AnnotationSource().methods(ChildApi)]
        assert names == ["create", "optional", "static", "inherited"]

    def test_decorator_order_is_preserved(self):
        create = AnnotationSource().methods(ChildApi)[0]
        assert create.tags == (POST, description("first"), description("second"))

    def test_self_and_var_args_are_not_parameters(self):
        create = AnnotationSource().methods(ChildApi)[0]
        assert [p.name for p in create.parameters] == ["limit"]
        assert create.parameters[0].declared_type is int
        assert create.parameters[0].tags == (query("limit"), REQUIRED)

    def test_optional_is_unwrapped(self):
        optional = AnnotationSource().methods(ChildApi)[1]
        assert optional.parameters[0].declared_type is str
        assert optional.parameters[0].tags == (query("q"),)
        assert optional.parameters[1].declared_type is int
        assert optional.parameters[1].tags == ()

    def test_staticmethod_keeps_first_parameter(self):
        static = AnnotationSource().methods(ChildApi)[2]
        assert static.tags == (GET,)
        assert [p.name for p in static.parameters] == ["q"]

    def test_unannotated_parameter(self):
        class Plain:
            def handle(self, value):
                pass

        method = AnnotationSource().methods(Plain)[0]
        assert method.parameters[0].declared_type is None
        assert method.parameters[0].tags == ()


class TestEndpointRegistry:
    def test_registered_descriptors(self):
        class External:
            pass

        registry = (
            EndpointRegistry()
            .register_class(External, path("/external"))
            .register_method(External, "fetch", GET, parameters=[("q", str, [query("q")])])
        )
        assert registry.class_tags(External) == (path("/external"),)
        methods = registry.methods(External)
        assert len(methods) == 1
        assert methods[0].name == "fetch"
        assert methods[0].tags == (GET,)
        assert methods[0].parameters[0].declared_type is str

    def test_unknown_class(self):
        registry = EndpointRegistry()
        assert registry.class_tags(object) == ()
        assert registry.methods(object) == []


class TestTag:
    def test_tag_as_decorator(self):
        @GET
        def handler():
            pass

        assert handler.__iodocs_tags__ == (Tag(kind=TagKind.HTTP_METHOD, value="GET"),)
