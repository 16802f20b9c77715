from carrotfacts.irc.parser import build_chat_message, parse_irc_message


def test_privmsg_with_prefix_and_trailing():
    msg = parse_irc_message(":alice!a@host PRIVMSG #veg :.carrot please")
    assert msg.prefix == "alice!a@host"
    assert msg.nick == "alice"
    assert msg.command == "PRIVMSG"
    assert msg.params == ["#veg", ".carrot please"]
    assert msg.trailing == ".carrot please"


def test_trailing_may_contain_colons():
    msg = parse_irc_message(":a!b@c PRIVMSG #veg :time: 12:00")
    assert msg.params == ["#veg", "time: 12:00"]


def test_ping_without_prefix():
    msg = parse_irc_message("PING :irc.example.org")
    assert msg.prefix is None
    assert msg.command == "PING"
    assert msg.trailing == "irc.example.org"


def test_numeric_with_middle_params():
    msg = parse_irc_message(":srv 001 carrotbot :Welcome to the network")
    assert msg.command == "001"
    assert msg.params == ["carrotbot", "Welcome to the network"]


def test_tags_parsed():
    msg = parse_irc_message("@time=2024-12-25T00:00:00Z;flag :a!b@c PRIVMSG #veg :hi")
    assert msg.tags == {"time": "2024-12-25T00:00:00Z", "flag": ""}
    assert msg.command == "PRIVMSG"


def test_lowercase_command_normalised():
    assert parse_irc_message("ping :x").command == "PING"


def test_prefix_only_line_has_no_command():
    msg = parse_irc_message(":lonely")
    assert msg.prefix == "lonely"
    assert msg.command is None


def test_empty_trailing_kept():
    msg = parse_irc_message(":a!b@c PRIVMSG #veg :")
    assert msg.params == ["#veg", ""]


def test_channel_message_replies_to_channel():
    parsed = parse_irc_message(":alice!a@host PRIVMSG #veg :.turnip")
    chat = build_chat_message(parsed, "carrotbot")
    assert chat.sender == "alice"
    assert chat.channel == "#veg"
    assert chat.text == ".turnip"


def test_private_query_replies_to_sender():
    parsed = parse_irc_message(":alice!a@host PRIVMSG CarrotBot :.turnip")
    chat = build_chat_message(parsed, "carrotbot")
    assert chat.channel == "alice"
    assert chat.target == "CarrotBot"


def test_non_privmsg_is_not_chat():
    parsed = parse_irc_message(":alice!a@host NOTICE #veg :hello")
    assert build_chat_message(parsed, "carrotbot") is None
