"""
どこで: `engine.core` サブパッケージ。
何を: フレーム駆動（Tickable/FrameClock）・入力状態・描画ウィンドウを提供。
なぜ: 入力と描画ループの基盤を構成し、上位層（UI/Runtime/Render）から再利用可能にするため。
"""
