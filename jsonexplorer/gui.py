import logging
import tkinter as tk
from tkinter import filedialog, messagebox, scrolledtext, ttk
from typing import Dict, Optional

from . import __version__
from .exceptions import JsonExplorerError
from .navigator import Navigator
from .path import Path

logger = logging.getLogger(__name__)

APP_TITLE = "JSON Explorer"
INDENT = "    "
MONOSPACE = ("TkFixedFont", 10)
HEADING = ("TkDefaultFont", 11, "bold")


class MainWindow:
    def __init__(self, root: tk.Tk, navigator: Navigator) -> None:
        self.root = root
        self.navigator = navigator
        self.root.title(APP_TITLE)
        self.root.geometry("1200x800")
        self.root.option_add("*tearOff", 0)

        # treeview item id -> node identifier, rebuilt on each refresh
        self._iid_to_path: Dict[str, Path] = {}

        self.show_types_var = tk.BooleanVar(value=navigator.options.show_node_types)
        self.show_values_var = tk.BooleanVar(value=navigator.options.show_node_values)
        self.path_var = tk.StringVar()
        self.file_var = tk.StringVar()

        self._create_menu()
        self._create_control_bar()
        self._create_panels()
        self.refresh()

    def _create_menu(self) -> None:
        menubar = tk.Menu(self.root)

        file_menu = tk.Menu(menubar)
        file_menu.add_command(
            label="Load JSON File", accelerator="Ctrl+O", command=self.open_file_dialog
        )
        file_menu.add_separator()
        file_menu.add_command(
            label="Exit", accelerator="Ctrl+Q", command=self.root.destroy
        )
        menubar.add_cascade(label="File", menu=file_menu)

        view_menu = tk.Menu(menubar)
        view_menu.add_checkbutton(
            label="Show Node Types",
            variable=self.show_types_var,
            command=self._on_display_options_changed,
        )
        view_menu.add_checkbutton(
            label="Show Node Values",
            variable=self.show_values_var,
            command=self._on_display_options_changed,
        )
        view_menu.add_separator()
        view_menu.add_command(label="Expand All", command=self.expand_all)
        view_menu.add_command(label="Collapse All", command=self.collapse_all)
        menubar.add_cascade(label="View", menu=view_menu)

        help_menu = tk.Menu(menubar)
        help_menu.add_command(label="About", command=self.show_about)
        menubar.add_cascade(label="Help", menu=help_menu)

        self.root.config(menu=menubar)
        self.root.bind_all("<Control-o>", lambda e: self.open_file_dialog())
        self.root.bind_all("<Control-q>", lambda e: self.root.destroy())

    def _create_control_bar(self) -> None:
        bar = ttk.Frame(self.root)
        bar.pack(fill="x", padx=6, pady=6)

        ttk.Button(bar, text="Load JSON File", command=self.open_file_dialog).pack(
            side="left", padx=2
        )
        ttk.Separator(bar, orient="vertical").pack(side="left", fill="y", padx=6)
        self.back_button = ttk.Button(bar, text="Go Back", command=self.go_back)
        self.back_button.pack(side="left", padx=2)
        ttk.Separator(bar, orient="vertical").pack(side="left", fill="y", padx=6)
        ttk.Label(bar, textvariable=self.path_var).pack(side="left", padx=2)
        ttk.Label(bar, textvariable=self.file_var).pack(side="right", padx=2)

    def _create_panels(self) -> None:
        paned = ttk.PanedWindow(self.root, orient="horizontal")
        paned.pack(fill="both", expand=True, padx=6, pady=(0, 6))

        # tree pane
        tree_frame = ttk.Frame(paned)
        ttk.Label(tree_frame, text="JSON Structure", font=HEADING).pack(
            anchor="w", pady=(0, 4)
        )
        tree_inner = ttk.Frame(tree_frame)
        tree_inner.pack(fill="both", expand=True)
        tree_inner.grid_rowconfigure(0, weight=1)
        tree_inner.grid_columnconfigure(0, weight=1)

        self.tree = ttk.Treeview(tree_inner, show="tree", selectmode="browse")
        self.tree.grid(row=0, column=0, sticky="nsew")
        tree_ys = ttk.Scrollbar(tree_inner, orient="vertical", command=self.tree.yview)
        tree_xs = ttk.Scrollbar(
            tree_inner, orient="horizontal", command=self.tree.xview
        )
        tree_ys.grid(row=0, column=1, sticky="ns")
        tree_xs.grid(row=1, column=0, sticky="ew")
        self.tree.configure(yscrollcommand=tree_ys.set, xscrollcommand=tree_xs.set)
        ttk.Style().configure("Treeview", font=MONOSPACE)

        # second press of a double click only fires <Double-Button-1>
        self.tree.bind("<Button-1>", self._on_tree_click)
        self.tree.bind("<Double-Button-1>", self._on_tree_double_click)

        # raw pane
        text_frame = ttk.Frame(paned)
        ttk.Label(text_frame, text="Raw JSON View", font=HEADING).pack(
            anchor="w", pady=(0, 4)
        )
        self.text_view = scrolledtext.ScrolledText(
            text_frame, wrap="none", font=MONOSPACE, undo=False
        )
        self.text_view.pack(fill="both", expand=True)

        paned.add(tree_frame, weight=1)
        paned.add(text_frame, weight=2)

    # actions

    def open_file_dialog(self) -> None:
        path = filedialog.askopenfilename(
            title="Load JSON File",
            filetypes=[("JSON", "*.json"), ("All files", "*.*")],
        )
        if not path:
            return
        self.open_file(path)

    def open_file(self, path: str) -> bool:
        """Load file at `path`, reporting failures in an error box."""
        try:
            self.navigator.load_file(path)
        except JsonExplorerError as e:
            messagebox.showerror("Error", "Error loading file:\n%s" % e)
            return False
        self.refresh()
        return True

    def go_back(self) -> None:
        if self.navigator.go_back():
            self.refresh()

    def expand_all(self) -> None:
        if self.navigator.has_document:
            self.navigator.expand_all()
            self.refresh()

    def collapse_all(self) -> None:
        if self.navigator.has_document:
            self.navigator.collapse_all()
            self.refresh()

    def show_about(self) -> None:
        messagebox.showinfo(
            "About %s" % APP_TITLE,
            "%s\nVersion %s\n\nA simple JSON file explorer built with Python and tkinter"
            % (APP_TITLE, __version__),
        )

    def _on_display_options_changed(self) -> None:
        self.navigator.set_show_node_types(self.show_types_var.get())
        self.navigator.set_show_node_values(self.show_values_var.get())
        self.refresh()

    def _identifier_at(self, event: tk.Event) -> Optional[Path]:
        iid = self.tree.identify_row(event.y)
        if not iid:
            return None
        return self._iid_to_path.get(iid)

    def _on_tree_click(self, event: tk.Event) -> Optional[str]:
        identifier = self._identifier_at(event)
        if identifier is None:
            return None
        self.navigator.click(identifier)
        self.refresh(focus=identifier)
        return "break"

    def _on_tree_double_click(self, event: tk.Event) -> Optional[str]:
        identifier = self._identifier_at(event)
        if identifier is None:
            return None
        # first press of the double click already went through _on_tree_click
        self.navigator.double_click(identifier, after_click=True)
        logger.info("Displaying %s", self.navigator.path_string)
        self.refresh()
        return "break"

    # rendering

    def refresh(self, focus: Optional[Path] = None) -> None:
        """Re-render tree and text panes from navigator state."""
        self._render_tree(focus)
        self._render_text()
        self.path_var.set("Path: %s" % self.navigator.path_string)
        file_name = self.navigator.file_name
        self.file_var.set("File: %s" % file_name if file_name else "")
        if self.navigator.can_go_back:
            self.back_button.state(["!disabled"])
        else:
            self.back_button.state(["disabled"])

    def _render_tree(self, focus: Optional[Path]) -> None:
        self.tree.delete(*self.tree.get_children())
        self._iid_to_path = {}
        tree = self.navigator.tree
        if tree is None:
            self.tree.insert("", "end", text="No JSON data loaded")
            return
        for index, (depth, node) in enumerate(tree.rows()):
            iid = str(index)
            self._iid_to_path[iid] = node.identifier
            text = INDENT * depth + self.navigator.label(node)
            self.tree.insert("", "end", iid=iid, text=text)
            if node.identifier == focus:
                self.tree.selection_set(iid)
                self.tree.see(iid)

    def _render_text(self) -> None:
        self.text_view.delete("1.0", tk.END)
        self.text_view.insert(tk.END, self.navigator.selected_text)
