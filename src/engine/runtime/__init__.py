"""
どこで: `engine.runtime` サブパッケージ。
何を: シミュレーション設定 `SimConfig`・スポーン間引き `SpawnThrottle`・tick 駆動の `Simulation` を提供。
なぜ: 落下/スポーン/クリックの規則をウィンドウや GL から切り離して検証できるようにするため。
"""
