"""
どこで: `api.app_runner` パッケージ。
何を: `api.app.run_app` を薄く保つための補助（座標変換・投影行列・ウィンドウ/レンダラ初期化・入力配線）。
なぜ: ランナー本体からヘルパを分離し、GL なしで検証できる部分を独立させるため。
"""
