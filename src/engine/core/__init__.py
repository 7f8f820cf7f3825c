"""
どこで: `engine.core` サブパッケージ。
何を: Shape/Container/ShapeManager・フレーム駆動（Tickable/FrameClock）・描画ウィンドウを提供。
なぜ: 図形の寿命管理と描画の基盤を構成し、上位層（runtime/ui/render）から再利用可能にするため。
"""
