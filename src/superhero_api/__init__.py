"""スーパーヒーロー登録APIパッケージ."""
