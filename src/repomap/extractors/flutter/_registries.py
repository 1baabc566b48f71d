"""Fixed name registries for Flutter/Dart classification."""

from __future__ import annotations

# Superclasses that make a class a widget.
WIDGET_BASE_CLASSES = frozenset(
    {
        # framework bases
        "Widget",
        "StatelessWidget",
        "StatefulWidget",
        "InheritedWidget",
        "InheritedModel",
        "InheritedNotifier",
        "InheritedTheme",
        "ProxyWidget",
        "ParentDataWidget",
        "RenderObjectWidget",
        "LeafRenderObjectWidget",
        "SingleChildRenderObjectWidget",
        "MultiChildRenderObjectWidget",
        "SlottedMultiChildRenderObjectWidget",
        "ImplicitlyAnimatedWidget",
        "AnimatedWidget",
        "StatusTransitionWidget",
        "PreferredSizeWidget",
        "ScrollView",
        "BoxScrollView",
        "CustomScrollView",
        "ListView",
        "GridView",
        "SingleChildScrollView",
        # hooks / riverpod / mobx / getx
        "HookWidget",
        "StatefulHookWidget",
        "ConsumerWidget",
        "ConsumerStatefulWidget",
        "HookConsumerWidget",
        "StatelessObserverWidget",
        "StatefulObserverWidget",
        "GetView",
        "GetWidget",
        "GetResponsiveView",
        # commonly subclassed widgets
        "MaterialApp",
        "CupertinoApp",
        "WidgetsApp",
        "Scaffold",
        "AppBar",
        "Container",
        "Row",
        "Column",
        "Flex",
        "Stack",
        "Center",
    }
)

# Idiom name -> literal marker tokens, in priority order (first match wins).
STATE_MANAGEMENT_PATTERNS: dict[str, tuple[str, ...]] = {
    "Cubit": ("Cubit<",),
    "Bloc": (
        "Bloc<",
        "BlocProvider",
        "BlocBuilder",
        "BlocListener",
        "BlocConsumer",
        "package:flutter_bloc/",
        "package:bloc/",
    ),
    "Riverpod": (
        "ProviderScope",
        "WidgetRef",
        "ConsumerWidget",
        "ConsumerStatefulWidget",
        "package:flutter_riverpod/",
        "package:hooks_riverpod/",
        "package:riverpod/",
    ),
    "GetX": ("GetxController", "GetMaterialApp", "GetBuilder", "Obx(", "package:get/"),
    "MobX": ("@observable", "@action", "Observer(", "package:mobx/", "package:flutter_mobx/"),
    "Redux": ("StoreProvider", "StoreConnector", "package:redux/", "package:flutter_redux/"),
    "StateNotifier": ("StateNotifier<", "StateNotifierProvider"),
    "ChangeNotifier": ("ChangeNotifier", "notifyListeners("),
    "Provider": (
        "ChangeNotifierProvider",
        "MultiProvider",
        "Provider.of<",
        "context.watch<",
        "context.read<",
        "package:provider/",
    ),
    "ValueNotifier": ("ValueNotifier<", "ValueListenableBuilder"),
    "InheritedWidget": ("InheritedWidget", "InheritedNotifier", "InheritedModel"),
    "StreamBuilder": ("StreamBuilder<", "StreamBuilder(", "StreamController<"),
    "setState": ("setState(",),
}

# Import path fragment -> idiom, for file-level provenance.
STATE_IMPORT_FRAGMENTS: tuple[tuple[str, str], ...] = (
    ("bloc", "Bloc"),
    ("riverpod", "Riverpod"),
    ("package:get/", "GetX"),
    ("mobx", "MobX"),
    ("provider", "Provider"),
)

# Recognized annotation markers.
ANNOTATIONS = (
    "@override",
    "@immutable",
    "@required",
    "@protected",
    "@visibleForTesting",
    "@mustCallSuper",
    "@pragma",
    "@JsonSerializable",
    "@freezed",
)

TEST_FILE_SUFFIXES = ("_test.dart", "_spec.dart")
