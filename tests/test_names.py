from parley.names import global_variable_name, is_global_variable


def test_global_detection_is_case_insensitive():
    assert is_global_variable("global.score")
    assert is_global_variable("GLOBAL.score")
    assert not is_global_variable("score")


def test_prefix_stripped():
    assert global_variable_name("Global.score") == "score"


def test_local_name_unchanged():
    assert global_variable_name("globalscore") == "globalscore"