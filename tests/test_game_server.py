from arenahub.game_server import add, main


def test_it_works():
    assert add(2, 2) == 4


def test_main_prints_banner(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Game server!\n"