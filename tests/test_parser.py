"""Tests for the todo.txt line and file parser."""

import logging
from datetime import date

from todotxt_tokens import parser as parser_module
from todotxt_tokens.description import DescriptionParseError
from todotxt_tokens.models import Context, Project, Text
from todotxt_tokens.parser import parse_task, parse_todo_file, parse_todo_txt, split_lines

SAMPLE_TODO_TXT = """\
(A) Thank Mom for the meatballs @phone
(B) Schedule Goodwill pickup +GarageSale @phone
Post signs around the neighborhood +GarageSale

x 2011-03-03 Call Mom
x (A) 2011-03-02 2011-03-01 Review pull request +TodoTxtTouch @github
2011-03-01 Buy milk @store due:2011-03-05
"""


def test_parse_full_line():
    task = parse_task("x (A) 2011-03-02 2011-03-01 Review pull request +Foo @bar")
    assert task.completed is True
    assert task.priority == "A"
    assert task.completion_date == date(2011, 3, 2)
    assert task.creation_date == date(2011, 3, 1)
    assert task.description == "Review pull request +Foo @bar"
    assert task.projects == ["Foo"]
    assert task.contexts == ["bar"]


def test_parse_plain_line():
    task = parse_task("Buy milk")
    assert task.completed is False
    assert task.priority is None
    assert task.completion_date is None
    assert task.creation_date is None
    assert task.components == (Text("Buy milk"),)


def test_lone_date_on_pending_task_is_creation_date():
    task = parse_task("(B) 2011-03-01 Buy milk")
    assert task.creation_date == date(2011, 3, 1)
    assert task.completion_date is None


def test_lone_date_on_done_task_is_completion_date():
    task = parse_task("x 2011-03-03 Call Mom")
    assert task.completion_date == date(2011, 3, 3)
    assert task.creation_date is None


def test_two_dates_on_pending_task_are_kept():
    task = parse_task("2011-03-02 2011-03-01 Buy milk")
    assert task.completed is False
    assert task.completion_date == date(2011, 3, 2)
    assert task.creation_date == date(2011, 3, 1)


def test_empty_line():
    task = parse_task("")
    assert task.components == ()
    assert task.description == ""


def test_description_failure_keeps_whole_line(monkeypatch, caplog):
    def broken(text):
        raise DescriptionParseError("boom")

    monkeypatch.setattr(parser_module, "parse_description", broken)
    with caplog.at_level(logging.WARNING, logger="todotxt_tokens.parser"):
        task = parse_task("x (A) 2011-03-02 Call +Mom")

    assert task.completed is False
    assert task.priority is None
    assert task.completion_date is None
    assert task.components == (Text("x (A) 2011-03-02 Call +Mom"),)
    assert "Could not tokenize line" in caplog.text


def test_parse_file_skips_blank_lines():
    tf = parse_todo_txt(SAMPLE_TODO_TXT)
    assert len(tf.tasks) == 6


def test_parse_file_components():
    tf = parse_todo_txt(SAMPLE_TODO_TXT)
    assert tf.tasks[1].components == (
        Text("Schedule Goodwill pickup "),
        Project("GarageSale"),
        Text(" "),
        Context("phone"),
    )
    assert tf.tasks[5].key_values == {"due": "2011-03-05"}


def test_pending_and_done():
    tf = parse_todo_txt(SAMPLE_TODO_TXT)
    assert len(tf.pending) == 4
    assert [t.description for t in tf.done] == [
        "Call Mom",
        "Review pull request +TodoTxtTouch @github",
    ]


def test_by_project_grouping():
    tf = parse_todo_txt(SAMPLE_TODO_TXT)
    groups = tf.by_project
    assert sorted(groups) == ["GarageSale", "TodoTxtTouch"]
    assert len(groups["GarageSale"]) == 2
    assert len(groups["TodoTxtTouch"]) == 1


def test_by_context_grouping():
    tf = parse_todo_txt(SAMPLE_TODO_TXT)
    groups = tf.by_context
    assert len(groups["phone"]) == 2
    assert len(groups["github"]) == 1
    assert len(groups["store"]) == 1


def test_repeated_tag_groups_task_once():
    tf = parse_todo_txt("Paint +house then clean +house\n")
    assert len(tf.by_project["house"]) == 1


def test_empty_file():
    tf = parse_todo_txt("")
    assert tf.tasks == []


def test_crlf_line_endings():
    tf = parse_todo_txt("(A) Call Mom\r\nBuy milk\r\n")
    assert [t.description for t in tf.tasks] == ["Call Mom", "Buy milk"]


def test_parse_todo_file(tmp_path):
    f = tmp_path / "todo.txt"
    f.write_text(SAMPLE_TODO_TXT, encoding="utf-8")

    tf = parse_todo_file(f)
    assert tf.source_path == str(f)
    assert len(tf.tasks) == 6


def test_split_lines():
    assert split_lines("a\r\nb\nc") == ["a", "b", "c"]
    assert split_lines("a\n\nb\n") == ["a", "", "b"]
    assert split_lines("a\x0cb\x1cc d\n") == ["a\x0cb\x1cc d"]
    assert split_lines("") == []
