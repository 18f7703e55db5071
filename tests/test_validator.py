from sample_api import EnumMismatchApi, PingApi, QueryApi

from iodocs_generator.generator.document import synthesize
from iodocs_generator.generator.validator import check, collect_warnings, find_duplicate_names, method_count
from iodocs_generator.model import ApiMeta, MethodDescriptor
from iodocs_generator.scanner.endpoint import scan_endpoints

API = ApiMeta(name="n", title="t", version="1", base_path="/")


def _descriptor(name: str, http_method: str, path: str) -> MethodDescriptor:
    return MethodDescriptor(name=name, http_method=http_method, path=path)


class TestCollectWarnings:
    def test_clean_document(self):
        assert collect_warnings(synthesize(API, [PingApi, QueryApi])) == {}

    def test_mismatch_reported(self):
        warnings = collect_warnings(synthesize(API, [EnumMismatchApi]))
        assert warnings == {
            "EnumMismatchApi_query.Enum mismatch":
                "Enumeration size (2) is not equal to enumeration description size (3)"
        }


class TestFindDuplicateNames:
    def test_unique(self):
        assert find_duplicate_names(scan_endpoints([PingApi, QueryApi])) == {}

    def test_duplicates(self):
        errors = find_duplicate_names([
            _descriptor("shared", "GET", "/a"),
            _descriptor("other", "GET", "/b"),
            _descriptor("shared", "POST", "/c"),
        ])
        assert list(errors) == ["shared"]
        assert "GET /a" in errors["shared"]
        assert "POST /c" in errors["shared"]


class TestCheck:
    def test_combines_problems(self):
        document = synthesize(API, [EnumMismatchApi])
        descriptors = scan_endpoints([EnumMismatchApi]) * 2
        problems = check(document, descriptors)
        assert "EnumMismatchApi_query" in problems
        assert "EnumMismatchApi_query.Enum mismatch" in problems

    def test_method_count(self):
        assert method_count(synthesize(API, [PingApi, QueryApi])) == 2
        assert method_count({}) == 0
