"""Tests for the naming module."""

from opgen.naming import escape_id, method_name, operation_id, snake_case, type_name


class TestTypeName:
    def test_simple(self):
        assert type_name("json") == "Json"

    def test_separators(self):
        assert type_name("x-www-form-urlencoded") == "XWwwFormUrlencoded"

    def test_camel_case_kept(self):
        assert type_name("petStore") == "PetStore"


class TestMethodName:
    def test_dashes(self):
        assert method_name("list-pets") == "listPets"

    def test_already_camel(self):
        assert method_name("showPetById") == "showPetById"

    def test_empty(self):
        assert method_name("--") == ""


class TestEscapeId:
    def test_valid_identifier_unchanged(self):
        assert escape_id("petId") == "petId"

    def test_reserved_word(self):
        assert escape_id("class") == "class_"

    def test_invalid_characters(self):
        assert escape_id("X-Request-Id") == "xRequestId"

    def test_leading_digit(self):
        assert escape_id("2fa") == "_2fa"

    def test_brackets(self):
        assert escape_id("page[size]") == "pageSize"

    def test_dollar_allowed(self):
        assert escape_id("$filter") == "$filter"

    def test_params_is_reserved(self):
        assert escape_id("params") == "params_"


class TestOperationId:
    def test_path_params(self):
        assert operation_id("get", "/pets/{petId}") == "getPetsPetId"

    def test_root(self):
        assert operation_id("GET", "/") == "get"


class TestSnakeCase:
    def test_variant_name(self):
        assert snake_case("findPetsByTag$Json") == "find_pets_by_tag_json"

    def test_acronym(self):
        assert snake_case("getHTTPStatus") == "get_http_status"
