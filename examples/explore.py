from jsonexplorer import Navigator

if __name__ == '__main__':
    nav = Navigator()
    nav.load_text("""{
        "a": {
            "a": ["hello", "you"],
            "b": 34,
            "c": "salut"
        },
        "c": [12, 24, ["yo"]]
    }""")
    nav.options.show_node_types = True
    nav.expand_all()
    print(nav.show())

    # re-root display on a subtree
    nav.navigate_to(["c", "2"])
    print(nav.path_string)
    print(nav.selected_text)
    nav.go_back()
    print(nav.show())
