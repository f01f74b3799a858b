"""Unit tests for Description and DescriptionCollection."""

import pytest

from src.domain.value_objects.description import Description, DescriptionCollection
from tests.factories import create_fake_description, create_fake_description_format


class TestDescription:
    """Test cases for Description value object."""

    def test_payload_is_copied(self):
        # Arrange
        payload = {"scheme": "oai", "nested": {"delimiter": ":"}}

        # Act
        description = create_fake_description(payload)
        payload["scheme"] = "changed"
        payload["nested"]["delimiter"] = "/"

        # Assert
        assert description.data["scheme"] == "oai"
        assert description.data["nested"]["delimiter"] == ":"

    def test_nested_payload_cannot_be_mutated(self):
        """Test that changes through nested values are impossible and equality holds."""
        # Arrange
        first = create_fake_description({"items": ["x"], "branding": {"logo": "a.png"}})
        second = create_fake_description({"items": ["x"], "branding": {"logo": "a.png"}})

        # Act & Assert
        with pytest.raises(AttributeError):
            first.data["items"].append("y")
        with pytest.raises(TypeError):
            first.data["branding"]["logo"] = "b.png"  # type: ignore[index]
        assert first.data["items"] == ("x",)
        assert first == second

    def test_equality_respects_key_order(self):
        assert create_fake_description({"a": "1", "b": "2"}) != create_fake_description({"b": "2", "a": "1"})

    def test_equality_respects_value_types(self):
        assert create_fake_description({"flag": True}) != create_fake_description({"flag": 1})
        assert create_fake_description({"flag": True}) == create_fake_description({"flag": True})

    def test_payload_is_read_only(self, oai_identifier_description):
        with pytest.raises(TypeError):
            oai_identifier_description.data["scheme"] = "other"  # type: ignore[index]

    def test_wrong_types_rejected(self):
        with pytest.raises(TypeError):
            Description("oai-identifier", {})  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Description(create_fake_description_format(), [("scheme", "oai")])  # type: ignore[arg-type]

    def test_equality_compares_format_and_payload(self, oai_identifier_description):
        same = create_fake_description(dict(oai_identifier_description.data))

        assert oai_identifier_description == same
        assert hash(oai_identifier_description) == hash(same)
        assert oai_identifier_description != create_fake_description({"scheme": "oai"})
        assert oai_identifier_description != Description(
            create_fake_description_format(root_tag="branding"), dict(oai_identifier_description.data)
        )

    def test_unhashable_payload_values_are_allowed(self):
        description = create_fake_description({"rights": ["cc-by", "cc0"]})
        assert isinstance(hash(description), int)

    def test_string_representation_includes_payload(self):
        description = create_fake_description({"scheme": "oai"})
        nested = create_fake_description({"rights": ["cc-by"]})
        assert str(nested).endswith('data: {"rights": ["cc-by"]})')
        assert str(description).startswith("Description(descriptionFormat: DescriptionFormat(")
        assert str(description).endswith('data: {"scheme": "oai"})')


class TestDescriptionCollection:
    """Test cases for DescriptionCollection value object."""

    def test_empty_collection(self):
        collection = DescriptionCollection()

        assert len(collection) == 0
        assert collection == DescriptionCollection()
        assert str(collection) == "DescriptionCollection()"

    def test_equality_is_order_sensitive(self):
        # Arrange
        first = create_fake_description({"scheme": "oai"})
        second = create_fake_description({"scheme": "handle"})

        # Assert
        assert DescriptionCollection(first, second) == DescriptionCollection(first, second)
        assert DescriptionCollection(first, second) != DescriptionCollection(second, first)
        assert DescriptionCollection(first) != DescriptionCollection(first, second)

    def test_preserves_order(self):
        first, second = create_fake_description(), create_fake_description()
        assert DescriptionCollection(first, second).to_list() == [first, second]

    def test_non_description_rejected(self):
        with pytest.raises(TypeError):
            DescriptionCollection({"scheme": "oai"})  # type: ignore[arg-type]
