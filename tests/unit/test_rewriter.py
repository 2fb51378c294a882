"""
Unit tests for the name rewriter.

Covers the digit-triggered default, the word-split variant, digit
dropping, sentinel fallback and the guarantee that every rewritten name
satisfies its own style.
"""

import pytest

from casefix.naming.classifier import classify
from casefix.naming.policy import RewritePolicy, SentinelNames
from casefix.naming.rewriter import rewrite, suggest, transform
from casefix.naming.symbols import SymbolDescriptor, style_for
from casefix.utils.constants import NamingStyle


class TestDigitTriggeredRewrite:
    """Test the default capitalization policy."""

    def test_snake_local_becomes_lower_camel(self, descriptors):
        assert rewrite("my_variable", descriptors['local']) == "myVariable"

    def test_digit_capitalizes_following_letter(self, descriptors):
        assert rewrite("userName2id", descriptors['method']) == "UserName2Id"
        assert rewrite("a1b2c", descriptors['local']) == "a1B2C"

    def test_snake_method_becomes_upper_camel(self, descriptors):
        assert rewrite("get_user_by_id", descriptors['method']) == "GetUserById"

    def test_first_letter_case(self, descriptors):
        assert rewrite("MyVariable", descriptors['local']) == "myVariable"
        assert rewrite("userService", descriptors['type']) == "UserService"

    def test_acronyms_are_folded(self, descriptors):
        assert rewrite("HTTPServer", descriptors['type']) == "HttpServer"
        assert rewrite("HTTPServer", descriptors['local']) == "httpServer"
        assert rewrite("XMLHttpRequest", descriptors['type']) == "XmlHttpRequest"
        assert rewrite("user2ID", descriptors['method']) == "User2Id"

    def test_adjacent_capitals_after_boundary(self, descriptors):
        assert rewrite("ABc", descriptors['type']) == "Abc"
        assert rewrite("A_B", descriptors['type']) == "Ab"

    def test_invalid_characters_are_removed(self, descriptors):
        assert rewrite("my-variable", descriptors['local']) == "myvariable"
        assert rewrite("user name", descriptors['method']) == "Username"

    def test_leading_digits_are_dropped(self, descriptors):
        assert rewrite("2fast", descriptors['method']) == "Fast"
        assert rewrite("9lives", descriptors['local']) == "lives"

    def test_compliant_names_are_unchanged(self, descriptors):
        assert rewrite("UserService", descriptors['type']) == "UserService"
        assert rewrite("myVariable", descriptors['local']) == "myVariable"
        assert rewrite("MAX_SIZE", descriptors['const']) == "MAX_SIZE"


class TestConstantRewrite:
    """Test SCREAMING_SNAKE_CASE rewriting."""

    def test_camel_case_is_uppercased(self, descriptors):
        assert rewrite("maxSize", descriptors['const']) == "MAXSIZE"

    def test_underscores_collapsed_and_trimmed(self, descriptors):
        assert rewrite("__max__size__", descriptors['const']) == "MAX_SIZE"

    def test_digits_are_removed(self, descriptors):
        assert rewrite("max_size_2", descriptors['const']) == "MAX_SIZE"
        assert rewrite("404", descriptors['const']) == "FIX_ME_CONST"

    def test_static_readonly_field(self, descriptors):
        assert rewrite("defaultTimeout", descriptors['static_readonly']) == "DEFAULTTIMEOUT"

    def test_no_stray_underscores(self, identifier_corpus, all_policies, descriptors):
        for policy in all_policies:
            for name in identifier_corpus:
                result = rewrite(name, descriptors['const'], policy)
                assert not result.startswith("_"), name
                assert not result.endswith("_"), name
                assert "__" not in result, name


class TestSentinels:
    """Test the fallback for identifiers with no usable characters."""

    def test_empty_type_name(self, descriptors):
        assert rewrite("", descriptors['type']) == "FixMeClass"

    def test_underscore_only_constant(self, descriptors):
        assert rewrite("___", descriptors['const']) == "FIX_ME_CONST"

    def test_sentinel_per_kind(self, descriptors):
        assert rewrite("", descriptors['method']) == "FixMeMethod"
        assert rewrite("$$$", descriptors['local']) == "fixMeVariable"
        assert rewrite("", descriptors['other']) == "FixMe"
        assert rewrite("_", descriptors['field']) == "FixMe"
        assert rewrite("___", descriptors['private_const']) == "FIX_ME_CONST"

    def test_digits_only_camel_falls_back(self, descriptors):
        assert rewrite("123", descriptors['method']) == "FixMeMethod"

    def test_custom_sentinels(self, descriptors):
        policy = RewritePolicy(sentinels=SentinelNames(local_name="renameMe"))
        assert rewrite("---", descriptors['local'], policy) == "renameMe"

    def test_default_sentinels_satisfy_their_style(self):
        sentinels = SentinelNames()
        assert classify(sentinels.type_name, NamingStyle.UPPER_CAMEL_CASE)
        assert classify(sentinels.method_name, NamingStyle.UPPER_CAMEL_CASE)
        assert classify(sentinels.local_name, NamingStyle.LOWER_CAMEL_CASE)
        assert classify(sentinels.constant_name, NamingStyle.SCREAMING_SNAKE_CASE)


class TestWordSplitRewrite:
    """Test the word-split capitalization variant."""

    def test_acronym_words(self, descriptors, word_split_policy):
        assert rewrite("HTTPServer", descriptors['type'], word_split_policy) == "HttpServer"
        assert rewrite("XML_parser", descriptors['local'], word_split_policy) == "xmlParser"

    def test_digits_inside_words(self, descriptors, word_split_policy):
        assert rewrite("userName2id", descriptors['method'], word_split_policy) == "UserName2Id"

    def test_snake_local(self, descriptors, word_split_policy):
        assert rewrite("my_variable", descriptors['local'], word_split_policy) == "myVariable"

    def test_constant_words_joined_with_underscores(self, descriptors, word_split_policy):
        assert rewrite("myVariable", descriptors['const'], word_split_policy) == "MY_VARIABLE"
        assert rewrite("HTTPServer", descriptors['const'], word_split_policy) == "HTTP_SERVER"

    def test_single_letter_words(self, descriptors, word_split_policy):
        assert rewrite("A_b", descriptors['type'], word_split_policy) == "Ab"


class TestDigitDropping:
    """Test rewriting with digit retention switched off."""

    def test_digits_removed_from_camel(self, descriptors, no_digits_policy):
        assert rewrite("userName2id", descriptors['method'], no_digits_policy) == "UserNameid"
        assert rewrite("Area51", descriptors['local'], no_digits_policy) == "area"

    def test_compliant_names_keep_digits(self, descriptors, no_digits_policy):
        assert rewrite("area51", descriptors['local'], no_digits_policy) == "area51"


class TestExemptSymbols:
    """Test rewriting of symbols with no naming convention."""

    def test_sanitized_name_returned(self, descriptors):
        assert rewrite("some-field", descriptors['field']) == "somefield"
        assert rewrite("my_field", descriptors['private_const']) == "my_field"

    def test_suggest_returns_none(self, descriptors):
        assert suggest("anything", descriptors['other']) is None


class TestRewriteProperties:
    """Test properties that hold for every input."""

    def test_rewritten_names_are_compliant(self, identifier_corpus, checked_descriptors, all_policies):
        for policy in all_policies:
            for descriptor, style in checked_descriptors:
                for name in identifier_corpus:
                    result = rewrite(name, descriptor, policy)
                    assert classify(result, style), (name, descriptor, policy, result)

    def test_compliant_names_are_fixed_points(self, identifier_corpus, checked_descriptors, all_policies):
        for policy in all_policies:
            for descriptor, style in checked_descriptors:
                for name in identifier_corpus:
                    once = rewrite(name, descriptor, policy)
                    assert rewrite(once, descriptor, policy) == once, (name, once)

    def test_deterministic(self, identifier_corpus, descriptors):
        for name in identifier_corpus:
            assert rewrite(name, descriptors['method']) == rewrite(name, descriptors['method'])

    def test_style_matches_descriptor(self, checked_descriptors):
        for descriptor, style in checked_descriptors:
            assert style_for(descriptor) is style


class TestSuggestAndTransform:
    """Test the helper entry points."""

    def test_suggest(self, descriptors):
        assert suggest("myVariable", descriptors['local']) is None
        assert suggest("my_variable", descriptors['local']) == "myVariable"

    def test_transform_empty_result(self):
        assert transform("___", NamingStyle.UPPER_CAMEL_CASE) == ""
        assert transform("123", NamingStyle.SCREAMING_SNAKE_CASE) == ""

    def test_transform_sanitized(self):
        assert transform("my_variable", NamingStyle.UPPER_CAMEL_CASE) == "MyVariable"
        assert transform("my_variable", NamingStyle.SCREAMING_SNAKE_CASE) == "MY_VARIABLE"
