"""Message builder: icons, markdown, attachments, send."""

import pytest

from slackhook import Attachment, IconType, InvalidInputError, Message


class TestIcon:
    @pytest.mark.parametrize("icon", [":smile:", "::", ":ghost:", ":a b:"])
    def test_colon_wrapped_is_emoji(self, client, icon):
        message = client.create_message().set_icon(icon)
        assert message.icon == icon
        assert message.icon_type == IconType.EMOJI

    @pytest.mark.parametrize("icon", ["http://x/y.png", ":", "smile:", ":smile", "x"])
    def test_everything_else_is_url(self, client, icon):
        message = client.create_message().set_icon(icon)
        assert message.icon_type == IconType.URL

    def test_none_clears_icon_and_type(self, client):
        message = client.create_message().set_icon(":smile:").set_icon(None)
        assert message.icon is None
        assert message.icon_type is None

    def test_icon_type_is_read_only(self, client):
        message = client.create_message()
        with pytest.raises(AttributeError):
            message.icon_type = IconType.EMOJI


class TestMarkdown:
    def test_toggles(self, client):
        message = client.create_message()
        assert message.allow_markdown is True
        assert message.disable_markdown().allow_markdown is False
        assert message.enable_markdown().allow_markdown is True
        assert message.set_allow_markdown(False).allow_markdown is False


class TestAttach:
    def test_raw_data_inherits_markdown_fields(self, client):
        message = client.create_message().set_markdown_in_attachments(["title"])
        message.attach({"text": "hi"})
        assert message.attachments[0].markdown_fields == ["title"]
        assert message.attachments[0].text == "hi"

    def test_explicit_mrkdwn_in_overrides(self, client):
        message = client.create_message().set_markdown_in_attachments(["title"])
        message.attach({"text": "hi", "mrkdwn_in": []})
        assert message.attachments[0].markdown_fields == []

    def test_null_mrkdwn_in_inherits(self, client):
        message = client.create_message().set_markdown_in_attachments(["title"])
        message.attach({"text": "hi", "mrkdwn_in": None})
        assert message.attachments[0].markdown_fields == ["title"]

    def test_python_field_name_overrides(self, client):
        message = client.create_message().set_markdown_in_attachments(["title"])
        message.attach({"text": "hi", "markdown_fields": ["text"]})
        assert message.attachments[0].markdown_fields == ["text"]

    def test_markdown_in_attachments_rejects_bare_string(self, client):
        message = client.create_message().set_markdown_in_attachments(["title"])
        with pytest.raises(InvalidInputError):
            message.set_markdown_in_attachments("text")
        assert message.markdown_in_attachments == ["title"]

    def test_inherited_list_is_a_copy(self, client):
        message = client.create_message().set_markdown_in_attachments(["title"])
        message.attach({"text": "hi"})
        message.markdown_in_attachments.append("text")
        assert message.attachments[0].markdown_fields == ["title"]

    def test_instance_is_adopted_as_is(self, client):
        attachment = Attachment(text="hi")
        message = client.create_message().set_markdown_in_attachments(["title"]).attach(attachment)
        assert message.attachments[0] is attachment
        assert attachment.markdown_fields == []

    @pytest.mark.parametrize("bad", [42, "text", None, [{"text": "hi"}]])
    def test_rejects_other_input(self, client, bad):
        message = client.create_message().attach({"text": "kept"})
        with pytest.raises(InvalidInputError):
            message.attach(bad)
        assert [a.text for a in message.attachments] == ["kept"]

    def test_set_attachments_replaces_in_order(self, client):
        a, b, c = Attachment(text="a"), Attachment(text="b"), Attachment(text="c")
        message = client.create_message().attach(c)
        message.set_attachments([a, b])
        assert message.attachments == [a, b]
        assert message.attachments[0] is a

    def test_set_attachments_accepts_mixed_input(self, client):
        message = client.create_message().set_markdown_in_attachments(["text"])
        message.set_attachments([Attachment(text="a"), {"text": "b"}])
        assert [a.text for a in message.attachments] == ["a", "b"]
        assert message.attachments[1].markdown_fields == ["text"]

    def test_set_attachments_with_bad_item_keeps_previous(self, client):
        message = client.create_message().attach({"text": "kept"})
        with pytest.raises(InvalidInputError):
            message.set_attachments([{"text": "new"}, 42])
        assert [a.text for a in message.attachments] == ["kept"]

    def test_clear_attachments(self, client):
        message = client.create_message().attach({"text": "a"}).clear_attachments()
        assert message.attachments == []


class TestChaining:
    def test_aliases(self, client):
        message = client.create_message().to("#ops").from_("deploybot").with_icon(":rocket:")
        assert message.channel == "#ops"
        assert message.username == "deploybot"
        assert message.icon_type == IconType.EMOJI

    def test_setters_return_same_instance(self, client):
        message = client.create_message()
        assert message.set_text("a").set_channel("#b").set_username("c") is message


class TestSend:
    def test_send_with_text_sets_text(self, client, transport):
        message = client.create_message()
        result = message.send("deployed")
        assert result is message
        assert message.text == "deployed"
        assert transport.decoded()["text"] == "deployed"

    def test_send_without_text_keeps_existing(self, client, transport):
        client.create_message().set_text("kept").send()
        assert transport.decoded()["text"] == "kept"

    def test_send_uses_owning_client(self, client, transport):
        message = Message(client)
        assert message.client is client
        message.send("hi")
        assert len(transport.requests) == 1

    def test_to_dict_matches_client_payload(self, client):
        message = client.create_message().set_text("hi")
        assert message.to_dict() == client.prepare_payload(message)
